import argparse
import json
import logging
import os
import sys

from colorama import Fore, Style, init

from .__version__ import __version__
from .errors import LinkParseError
from .parse import parse

log = logging.getLogger('weblinks')

parser = argparse.ArgumentParser(description='Parse HTTP Link header values')

parser.add_argument('headers', metavar='HEADER', nargs='*',
                    help='a Link header value; if none are given they are read from stdin, one per line')

parser.add_argument('--json', default=False, action='store_true',
                    help='print the links of each header as a JSON object keyed by relation type')

parser.add_argument('-v', '--verbose', default=False, action='store_true',
                    help='trace the parser; may also be enabled with the WEBLINKS_DEBUG environment variable')

parser.add_argument('-q', '--quiet', default=False, action='store_true',
                    help='only report headers that fail to parse')

parser.add_argument('-V', '--version', default=False, action='version', version=f'%(prog)s {__version__}')


class ColourHandler(logging.Handler):
    def emit(self, record):
        color = Style.DIM
        if record.levelno >= logging.ERROR:
            color = Fore.RED
        elif record.levelno >= logging.WARNING:
            color = Fore.YELLOW
        print(color + self.format(record) + Style.RESET_ALL, file=sys.stderr)


def main(argv=None):
    init(autoreset=True)
    args = parser.parse_args(argv)
    configure_logging(get_log_level(args))
    headers = args.headers or [line.strip() for line in sys.stdin if line.strip()]
    success = True
    for header in headers:
        try:
            links = parse(header)
        except LinkParseError as e:
            print(Fore.RED + f'{header!r}: {e}')
            success = False
            continue
        if args.quiet:
            continue
        if args.json:
            print(json.dumps(links_as_dict(links)))
        else:
            print_links(links)
    return int(not success)


def get_log_level(args):
    if args.verbose or os.environ.get('WEBLINKS_DEBUG'):
        return logging.DEBUG
    if args.quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(level):
    log.handlers = [ColourHandler()]
    log.setLevel(level)


def links_as_dict(links):
    return {rel: {'uri': str(link.uri), 'attributes': dict(link.attributes)} for rel, link in links.items()}


def print_links(links):
    for rel, link in links.items():
        print(f'{Style.BRIGHT}{rel}{Style.RESET_ALL}: {Fore.CYAN}{link.uri}{Fore.RESET}')
        for key, value in link.attributes.items():
            print(f'    {key}="{value}"')


if __name__ == '__main__':
    sys.exit(main())
