"""
Command line front end.

    fdkeys deps.txt                     all candidate keys
    fdkeys deps.txt --closure AB        closure of {A, B} and whether it is a superkey
    fdkeys deps.txt --normal-forms      keys plus minimal cover, BCNF and 3NF
"""

import argparse
import sys
from itertools import islice
from typing import List, Optional

from .closure import STRATEGIES, ClosureEngine, ClosureGraph
from .config import load_config
from .dependencies import FDCollection, as_attribute_set
from .errors import CapacityError, ConfigError, ParseError, PreconditionError
from .keys import iter_candidate_keys
from .log import get_logger, setup_logging
from .normal_forms import is_3nf, is_bcnf, minimal_cover
from .parser import load_dependencies

logger = get_logger(__name__)


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError('must be a positive integer')
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fdkeys',
        description='Compute attribute closures and candidate keys from functional dependencies.')
    parser.add_argument('file', help='functional dependency file')
    parser.add_argument('--strategy', choices=STRATEGIES, default=None,
                        help='closure strategy (default: from config, else graph)')
    parser.add_argument('--closure', metavar='ATTRS', default=None,
                        help='print the closure of ATTRS (e.g. AB) instead of the keys')
    parser.add_argument('--max-keys', type=positive_int, default=None, metavar='N',
                        help='stop after N candidate keys')
    parser.add_argument('--normal-forms', action='store_true',
                        help='also print a minimal cover and BCNF/3NF status')
    parser.add_argument('--dump-graph', action='store_true',
                        help='print the closure graph (thresholds and edges)')
    parser.add_argument('--config', default=None, help='YAML configuration file')
    parser.add_argument('--log-level', default=None, help='DEBUG, INFO, WARNING, ...')
    return parser


def print_keys(engine: ClosureEngine, max_keys: Optional[int]):
    """ Print one candidate key per line in discovery order. """
    keys = iter_candidate_keys(engine)
    if max_keys is not None:
        keys = islice(keys, max_keys)
    count = 0
    for key in keys:
        print(key.to_letters())
        count += 1
    logger.info('%d candidate key(s) printed', count)


def print_closure(engine: ClosureEngine, attrs: str):
    seed = as_attribute_set(attrs)
    if not engine.fds.full_set.contains(seed):
        raise ParseError('Closure attributes ' + repr(attrs) + ' are not in the schema')
    result, superkey = engine.query(seed)
    print(seed.to_letters() + '+ = ' + result.to_letters())
    print('Superkey: ' + ('yes' if superkey else 'no'))


def print_normal_forms(F: FDCollection, strategy: str):
    cover = minimal_cover(F)
    print('Minimal cover: ' + ', '.join(map(repr, cover)))
    print('BCNF: ' + ('yes' if is_bcnf(F, strategy) else 'no'))
    print('3NF: ' + ('yes' if is_3nf(F, strategy) else 'no'))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        setup_logging(args.log_level or config.log_level, config.log_format)
        strategy = args.strategy or config.strategy
        max_keys = args.max_keys if args.max_keys is not None else config.max_keys

        F = load_dependencies(args.file)
        print('Number of attributes: ' + str(F.attribute_count))
        engine = ClosureEngine(F, strategy)
        if args.dump_graph:
            graph = engine.graph if engine.graph is not None else ClosureGraph(F)
            print(graph.describe())
        if args.closure is not None:
            print_closure(engine, args.closure)
        else:
            print_keys(engine, max_keys)
        if args.normal_forms:
            print_normal_forms(F, strategy)
    except OSError as e:
        print('Could not open file: ' + str(e), file=sys.stderr)
        return 1
    except PreconditionError as e:
        print('Invalid input: ' + str(e), file=sys.stderr)
        return 1
    except (ParseError, CapacityError, ConfigError) as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
