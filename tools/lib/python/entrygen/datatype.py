
from re import sub

from entrygen.proto import remove_arg_name

class Category:

    def __init__(self, name, symbol):
        self.name = name
        self.symbol = symbol

    def __str__(self):
        return self.name

    __repr__ = __str__

class Strategy:

    def __init__(self, name, function):
        self.name = name
        self.function = function

    def get_reference(self):
        return "&" + self.function

    reference = property(get_reference)

    def __str__(self):
        return self.name

    __repr__ = __str__

INTEGER = Category("Integer", "INT")
ADDRESS = Category("Address", "ADDRESS")
PID = Category("ProcessID", "PID")
# The harness has no MACH_PORT type. Ports are fuzzed through their own
# generator but declared as addresses.
MACH_PORT = Category("MachPort", "ADDRESS")

GENERATE_INT = Strategy("GenerateInt", "generate_int")
GENERATE_POINTER = Strategy("GeneratePointer", "generate_ptr")
GENERATE_PID = Strategy("GeneratePID", "generate_pid")
GENERATE_MACH_PORT = Strategy("GenerateMachPort", "generate_mach_port")

STRATEGY_OF_CATEGORY = {
        INTEGER: GENERATE_INT,
        ADDRESS: GENERATE_POINTER,
        PID: GENERATE_PID,
        MACH_PORT: GENERATE_MACH_PORT }

CATEGORY_OF_DATATYPE = {
        "au_asid_t": INTEGER,
        "au_id_t": INTEGER,
        "clockid_t": INTEGER,
        "dev_t": INTEGER,
        "gid_t": INTEGER,
        "id_t": INTEGER,
        "idtype_t": INTEGER,
        "int": INTEGER,
        "int32_t": INTEGER,
        "int64_t": INTEGER,
        "key_t": INTEGER,
        "long": INTEGER,
        "lwpid_t": INTEGER,
        "mode_t": INTEGER,
        "off_t": INTEGER,
        "sae_associd_t": INTEGER,
        "sae_connid_t": INTEGER,
        "sem_t": INTEGER,
        "semun_t": INTEGER,
        "siginfo_t": INTEGER,
        "sigset_t": INTEGER,
        "size_t": INTEGER,
        "socklen_t": INTEGER,
        "ssize_t": INTEGER,
        "time_t": INTEGER,
        "u_int": INTEGER,
        "u_int32_t": INTEGER,
        "u_long": INTEGER,
        "uid_t": INTEGER,
        "uint32_t": INTEGER,
        "uint64_t": INTEGER,
        "uint8_t": INTEGER,
        "unsigned": INTEGER,
        "user_size_t": INTEGER,
        "user_ssize_t": INTEGER,
        "uuid_t": INTEGER,
        "caddr_t": ADDRESS,
        "fhandle_t": ADDRESS,
        "user_addr_t": ADDRESS,
        "pid_t": PID,
        "mach_port_name_t": MACH_PORT }

def normalize_declaration(declaration):
    return sub(r"\s+", " ", declaration)

def normalize_datatype(datatype):
    return sub(r"\s*(\*+)", r" \1", normalize_declaration(datatype).strip())

def category_of_datatype(datatype):
    try:
        return CATEGORY_OF_DATATYPE[datatype]
    except KeyError:
        pass
    return ADDRESS if datatype.endswith("*") else None

def classify(declaration):
    declaration = normalize_declaration(declaration)
    datatype = normalize_datatype(remove_arg_name(declaration))
    category = category_of_datatype(datatype)
    return datatype, category, STRATEGY_OF_CATEGORY.get(category)

# vim: tabstop=4 shiftwidth=4 expandtab softtabstop=4 filetype=python
