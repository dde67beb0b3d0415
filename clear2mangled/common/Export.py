from .DeclarationDetails import DeclarationDetails


class Export(object):

    ordinal = None
    rva = None
    mangled_declaration = None
    clear_declaration = None
    declaration_details = None

    def __init__(self, ordinal, rva, mangled_declaration, clear_declaration, declaration_details):
        self.ordinal = ordinal
        self.rva = rva
        self.mangled_declaration = mangled_declaration
        self.clear_declaration = clear_declaration
        self.declaration_details = declaration_details

    def getVirtualAddress(self, base_addr, mask=0xFFFFFFFFFFFFFFFF):
        return (base_addr + self.rva) & mask

    @classmethod
    def fromDict(cls, export_dict):
        return cls(
            int(export_dict["ordinal"]),
            int(export_dict["rva"]),
            export_dict["mangled_declaration"],
            export_dict["clear_declaration"],
            DeclarationDetails.fromDict(export_dict["declaration_details"]),
        )

    def toDict(self):
        return {
            "ordinal": self.ordinal,
            "rva": self.rva,
            "mangled_declaration": self.mangled_declaration,
            "clear_declaration": self.clear_declaration,
            "declaration_details": self.declaration_details.toDict(),
        }

    def __eq__(self, other):
        if not isinstance(other, Export):
            return NotImplemented
        return self.toDict() == other.toDict()

    def __repr__(self):
        return "Export(ordinal={}, rva=0x{:x}, mangled_declaration={!r})".format(self.ordinal, self.rva, self.mangled_declaration)
