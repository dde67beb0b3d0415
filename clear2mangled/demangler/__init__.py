from .PdbparseDemangler import PdbparseDemangler
from .UndnameDemangler import UndnameDemangler

DEMANGLERS = {
    "undname": UndnameDemangler,
    "pdbparse": PdbparseDemangler,
}


def getDemangler(config):
    if config.DEMANGLER not in DEMANGLERS:
        raise ValueError("unknown demangler backend: {}".format(config.DEMANGLER))
    return DEMANGLERS[config.DEMANGLER](config)
