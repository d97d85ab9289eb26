"""Configure expectations from the command line through ``startup``.

Bind the functions below to a startup object, and the ``D`` table is
set from command-line flags before tests run:

  PARSER ---> PARSE --+--> ARGS ---> configure
                      |
              ARGV ---+

Examples:
>>> from startup import startup
>>> expectations.startups.bind(startup)

Setting the ``DEBUG`` environment variable logs every reported failure
at ``DEBUG`` level.
"""

__all__ = [
    'ARGS',
    'ARGV',
    'PARSE',
    'PARSER',

    'add_arguments',
    'bind',
    'configure',
    'parse_argv',
]

import logging
import os

from startup import startup as startup_

import expectations

ARGS = 'args'
ARGV = 'argv'
PARSE = 'parse'
PARSER = 'parser'

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def add_arguments(parser: PARSER) -> PARSE:
    group = parser.add_argument_group(expectations.__name__)
    group.add_argument(
        '--expect-type-info', action='store_true',
        default=expectations.D['TYPE_INFO'],
        help='annotate values in failure messages with their type')
    group.add_argument(
        '--expect-no-banner', dest='expect_banner', action='store_false',
        default=expectations.D['BANNER'],
        help='do not print the file name before its failures')
    group.add_argument(
        '--expect-no-location', dest='expect_location', action='store_false',
        default=expectations.D['LOCATION'],
        help='do not resolve the code location of failures')


def parse_argv(parser: PARSER, argv: ARGV, _: PARSE) -> ARGS:
    return parser.parse_args(argv[1:])


def configure(args: ARGS):
    expectations.D['TYPE_INFO'] = args.expect_type_info
    expectations.D['BANNER'] = args.expect_banner
    expectations.D['LOCATION'] = args.expect_location


def bind(startup=startup_, *, with_parse_argv=True):
    """Register the configuration functions with ``startup``.

    Pass ``with_parse_argv=False`` when something else already turns
    ``ARGV`` into ``ARGS``.
    """
    startup(add_arguments)
    if with_parse_argv:
        startup(parse_argv)
    startup(configure)


if os.environ.get('DEBUG') not in (None, '', '0'):
    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
    logging.getLogger(expectations.__name__).setLevel(logging.DEBUG)
    logging.getLogger(__name__).debug('start at DEBUG level')
