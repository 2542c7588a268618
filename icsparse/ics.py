# a really simple ICS file parser to avoid large dependencies
# we only need to read these calendars into a tree of records,
# values are kept as raw strings and nothing is written back.
import logging
from .constants import *
from .types import *
from .errors import *
from .tokenizer import tokenize

__all__ = ['ICSReader', 'ICSCalendar', 'parse', 'parse_tokens']


class ICSReader:
    def __init__(self, tokens, skip_unknown_blocks=True):
        self.tokens = list(tokens)
        self.pos = 0
        self.skip_unknown_blocks = skip_unknown_blocks

    @property
    def exhausted(self):
        return self.pos >= len(self.tokens)

    def next_token(self):
        if self.exhausted:
            return None
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _block(self, label):
        # yields the tokens of the current block, stops right after END:<label>
        # or when there is nothing left (a missing END is not an error)
        while True:
            token = self.next_token()
            if token is None:
                logging.debug(f"{label} :: no END found, closing at end of input")
                return
            if token == (END, label):
                return
            yield token

    def read_begin(self, begin):
        key, block_type = begin
        if key != BEGIN:
            raise UnexpectedBlockKind(f"expected {BEGIN}, got {key}")

        logging.debug(f"BEGIN :: reading {block_type}")
        if block_type == VEVENT:
            return Entry(kind=EntryKind.EVENT, record=self.read_vevent(), block_type=block_type)
        elif block_type == VCALENDAR:
            return Entry(kind=EntryKind.CALENDAR, record=self.read_vcalendar(), block_type=block_type)
        elif block_type == VTIMEZONE:
            return Entry(kind=EntryKind.TIMEZONE, record=self.read_vtimezone(), block_type=block_type)

        logging.warning(f"BEGIN :: not parsing {block_type!r} blocks")
        if self.skip_unknown_blocks:
            skipped = sum(1 for _ in self._block(block_type))
            logging.debug(f"BEGIN :: skipped {skipped} lines of {block_type}")
        return Entry(kind=EntryKind.UNSUPPORTED, block_type=block_type)

    def read_vcalendar(self):
        this = CalendarRecord()
        for key, value in self._block(VCALENDAR):
            logging.debug(f"{VCALENDAR} :: reading {key}")
            if key == BEGIN:
                entry = self.read_begin((key, value))
                if entry.kind == EntryKind.CALENDAR:
                    raise IllegalNesting("calendar inside a calendar !")
                elif entry.kind == EntryKind.TIMEZONE:
                    # only one timezone per calendar, the latest one wins
                    this.timezone = entry.record
                elif entry.kind == EntryKind.EVENT:
                    this.events.append(entry.record)
            elif key in CALENDAR_PROPERTIES:
                setattr(this, CALENDAR_PROPERTIES[key], value)
            else:
                logging.debug(f"{VCALENDAR} :: unknown {key}")
                this.unknown.append((key, value))
        return this

    def read_vevent(self):
        this = EventRecord()
        for key, value in self._block(VEVENT):
            logging.debug(f"{VEVENT} :: reading {key} {value}")
            if key == BEGIN:
                raise IllegalChildBlock(f"unexpected BEGIN:{value} inside {VEVENT} !")
            elif key in EVENT_PROPERTIES:
                setattr(this, EVENT_PROPERTIES[key], value)
            else:
                logging.debug(f"{VEVENT} :: unknown {key}")
                this.unknown.append((key, value))
        return this

    def read_vtimezone(self):
        this = TimezoneRecord()
        for key, value in self._block(VTIMEZONE):
            logging.debug(f"{VTIMEZONE} :: reading {key} {value}")
            if key == BEGIN:
                this.definitions[value] = self.read_tz(value)
            elif key in TIMEZONE_PROPERTIES:
                setattr(this, TIMEZONE_PROPERTIES[key], value)
            else:
                logging.debug(f"{VTIMEZONE} :: unknown {key}")
                this.unknown.append((key, value))
        return this

    def read_tz(self, label):
        this = TimezoneRuleRecord()
        for key, value in self._block(label):
            logging.debug(f"{label} :: reading {key} {value}")
            if key in TIMEZONE_RULE_PROPERTIES:
                setattr(this, TIMEZONE_RULE_PROPERTIES[key], value)
            else:
                logging.debug(f"{label} :: unhandled/unexpected {key}")
        return this


def parse_tokens(tokens, **kwargs):
    reader = ICSReader(tokens, **kwargs)
    first = reader.next_token()
    if first is None:
        raise EmptyInput("empty ics")
    return reader.read_begin(first)


def parse(raw, **kwargs):
    return parse_tokens(tokenize(raw), **kwargs)


class ICSCalendar:
    def __init__(self, raw, **kwargs):
        self.entry = parse(raw, **kwargs)
        self.data = self.entry.record

    @property
    def events(self):
        if self.entry.kind == EntryKind.CALENDAR:
            return self.data.events
        elif self.entry.kind == EntryKind.EVENT:
            return [self.data]
        return []

    @property
    def timezone(self):
        if self.entry.kind == EntryKind.CALENDAR:
            return self.data.timezone
        elif self.entry.kind == EntryKind.TIMEZONE:
            return self.data
        return None

    def json(self):
        return DataClass.json(self.data)
