class ICSError(Exception):
    def __init__(self, s):
        super().__init__(s)
        self.s = s
    def __repr__(self): return f"{self.__class__.__name__}({self.s!r})"

# nothing to parse: the document holds no property line at all
class EmptyInput(ICSError): pass

# a token expected to open a block isn't a BEGIN
class UnexpectedBlockKind(ICSError): pass

# VCALENDAR inside a VCALENDAR
class IllegalNesting(ICSError): pass

# BEGIN inside a VEVENT, events can't hold sub blocks
class IllegalChildBlock(ICSError): pass
