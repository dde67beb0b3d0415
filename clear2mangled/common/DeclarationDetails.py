class DeclarationDetails(object):
    """Shallow classification of a normalized demangled declaration"""

    c_function = False
    variable = False
    constructor_function = False
    destructor_function = False
    name = ""
    parentheses_pairs = None

    def __init__(self, c_function=False, variable=False, constructor_function=False, destructor_function=False, name="", parentheses_pairs=None):
        self.c_function = c_function
        self.variable = variable
        self.constructor_function = constructor_function
        self.destructor_function = destructor_function
        self.name = name
        self.parentheses_pairs = list(parentheses_pairs) if parentheses_pairs is not None else []

    @property
    def kind(self):
        if self.variable:
            return "Variable"
        if self.c_function:
            return "C Function"
        return "C++ Function"

    def matches(self, other):
        """ structural identity used for lookups, the variable flag is deliberately not compared """
        return (self.name == other.name
                and self.c_function == other.c_function
                and self.constructor_function == other.constructor_function
                and self.destructor_function == other.destructor_function)

    @classmethod
    def fromDict(cls, details_dict):
        return cls(
            c_function=bool(details_dict["c_function"]),
            variable=bool(details_dict["variable"]),
            constructor_function=bool(details_dict["constructor_function"]),
            destructor_function=bool(details_dict["destructor_function"]),
            name=details_dict["name"],
            parentheses_pairs=details_dict["parentheses_pairs"],
        )

    def toDict(self):
        return {
            "c_function": self.c_function,
            "variable": self.variable,
            "constructor_function": self.constructor_function,
            "destructor_function": self.destructor_function,
            "name": self.name,
            "parentheses_pairs": list(self.parentheses_pairs),
        }

    def __eq__(self, other):
        if not isinstance(other, DeclarationDetails):
            return NotImplemented
        return self.toDict() == other.toDict()

    def __repr__(self):
        return "DeclarationDetails({})".format(", ".join("{}={!r}".format(key, value) for key, value in self.toDict().items()))

    def __str__(self):
        lines = [
            "Name:                {}".format(self.name),
            "CFunction:           {}".format("YES" if self.c_function else "NO"),
            "ConstructorFunction: {}".format("YES" if self.constructor_function else "NO"),
            "DestructorFunction:  {}".format("YES" if self.destructor_function else "NO"),
        ]
        return "\n".join(lines)
