import os
import logging
from yaml import load, Loader
from icsparse import USER_AGENT

DEFAULTS = {
    'log_level': 'INFO',
    'timeout': 10,
    'skip_unknown_blocks': True,
    'json_indent': 2,
    'user_agent': USER_AGENT,
}

def load_config(path=None):
    path = path or os.environ.get('ICS_DUMP_CONFIG') or 'config.yaml'
    config = dict(DEFAULTS)
    if not os.path.exists(path):
        logging.debug('config :: {} not found, using defaults.'.format(path))
        return config

    with open(path, 'r') as f:
        loaded = load(f, Loader=Loader)
    # an empty file loads as None
    if loaded:
        config.update(loaded)
    return config
