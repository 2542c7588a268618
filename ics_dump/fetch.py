import logging
import requests


def is_url(source):
    return source.startswith('http://') or source.startswith('https://')


def read_source(source, cfg):
    if is_url(source):
        logging.info('fetch :: downloading {}'.format(source))
        r = requests.get(source, headers={'User-Agent': cfg['user_agent']}, timeout=cfg['timeout'])
        r.raise_for_status()
        return r.text

    with open(source, 'r', encoding='utf-8') as f:
        return f.read()
