from enum import Enum

class DataClass:
    # fields listed here get a fresh empty container instead of None
    _factories = {}

    def __init__(self, **kwargs):
        for k in type(self).__annotations__:
            factory = self._factories.get(k)
            setattr(self, k, factory() if factory else None)
        for i in kwargs:
            setattr(self, i, kwargs[i])

    def __repr__(self):
        return f"{self.__class__.__name__}({', '.join([f'{k} = {v.__repr__()}' for k,v in self.__dict__.items()])})"

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def json(c):
        if isinstance(c, DataClass):
            return DataClass.json(c.__dict__)
        elif isinstance(c, (list, tuple)):
            return [DataClass.json(_) for _ in c]
        elif isinstance(c, dict):
            return {k: DataClass.json(v) for k,v in c.items()}
        elif isinstance(c, Enum):
            return c._name_
        else:
            return c

class TimezoneRuleRecord(DataClass):
    # STANDARD / DAYLIGHT sub block, no unknown bag on purpose
    offset_from: str
    offset_to: str
    name: str
    dtstart: str
    rrule: str

class TimezoneRecord(DataClass):
    _factories = {'definitions': dict, 'unknown': list}
    tzid: str
    definitions: dict # sub block name -> TimezoneRuleRecord
    unknown: list

class EventRecord(DataClass):
    _factories = {'unknown': list}
    uid: str
    class_: str
    summary: str
    sequence: str
    dtstamp: str
    location: str
    categories: str
    description: str
    unknown: list

class CalendarRecord(DataClass):
    _factories = {'events': list, 'unknown': list}
    version: str
    method: str
    prodid: str
    timezone: TimezoneRecord
    events: list
    unknown: list

class EntryKind(Enum):
    CALENDAR = 0
    TIMEZONE = 1
    EVENT = 2
    UNSUPPORTED = 3

class Entry(DataClass):
    """Outcome of reading one BEGIN...END block.

    `record` is None only when `kind` is UNSUPPORTED, `block_type` is the
    label found on the BEGIN line.
    """
    kind: EntryKind
    record: DataClass
    block_type: str
