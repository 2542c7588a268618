import argparse
import json
import logging
import sys
import requests
import icsparse
from .config import load_config
from .fetch import read_source


def build_parser():
    p = argparse.ArgumentParser(prog='ics-dump', description='Parse an ics calendar and dump it as json.')
    p.add_argument('source', help='path or http(s) url of the calendar')
    p.add_argument('-o', '--output', help='write json here instead of stdout')
    p.add_argument('-c', '--config', help='yaml config file (default: $ICS_DUMP_CONFIG or config.yaml)')
    p.add_argument('--log-level', help='override log_level from the config')
    p.add_argument('--keep-unknown-blocks', action='store_true',
                   help="don't skip the body of unsupported blocks, let it land in the parent")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    if args.log_level:
        config['log_level'] = args.log_level
    # yaml may hold "debug", logging only knows "DEBUG" (ints pass through)
    if isinstance(config['log_level'], str):
        config['log_level'] = config['log_level'].upper()
    if args.keep_unknown_blocks:
        config['skip_unknown_blocks'] = False

    logging.basicConfig(level=config['log_level'])

    logging.info(f"Opening {args.source}")
    try:
        raw = read_source(args.source, config)
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        logging.error(f"couldn't read {args.source}: {e}")
        return 2

    try:
        entry = icsparse.parse(raw, skip_unknown_blocks=config['skip_unknown_blocks'])
    except icsparse.ICSError as e:
        logging.error(f"couldn't parse {args.source}: {e}")
        return 1

    if entry.kind == icsparse.EntryKind.UNSUPPORTED:
        logging.warning(f"top level block {entry.block_type} is not supported, nothing parsed")

    out = json.dumps(icsparse.DataClass.json(entry.record), indent=config['json_indent'])
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(out)
        logging.info(f"wrote {args.output}")
    else:
        sys.stdout.write(out + '\n')
    return 0
