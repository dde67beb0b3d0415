class RawExport(object):
    """ simple DTO for one entry of a PE export table """

    ordinal = None
    rva = None
    mangled_name = None

    def __init__(self, ordinal, rva, mangled_name):
        self.ordinal = ordinal
        self.rva = rva
        self.mangled_name = mangled_name

    def __eq__(self, other):
        if not isinstance(other, RawExport):
            return NotImplemented
        return (self.ordinal, self.rva, self.mangled_name) == (other.ordinal, other.rva, other.mangled_name)

    def __repr__(self):
        return "RawExport(ordinal={}, rva=0x{:x}, mangled_name={!r})".format(self.ordinal, self.rva, self.mangled_name)
