import sys

from syslog_sniffer.cli import main

# debug run
# sudo python main.py --interface eth0 --debug
# python main.py --listen --port 5140 --periodic --frequency 5

if __name__ == "__main__":
    sys.exit(main())
