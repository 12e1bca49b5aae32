
from entrygen.datatype import classify
from entrygen.proto import count_args, drop_annotations,               \
                           extract_prototype, extract_return_type,     \
                           extract_syscall_name, extract_syscall_number, \
                           split_args
from entrygen.share import ARG_SYMBOLS, PLACEHOLDER_SYSCALLS, warn

class TooManyArguments(Exception):

    def __init__(self, name, count):
        self.name = name
        self.count = count
        fmt = "{name} takes {count} arguments, but entries hold at most {max}."
        super().__init__(fmt.format(name=name, count=count, max=len(ARG_SYMBOLS)))

class Argument:

    def __init__(self, declaration, datatype, category, strategy, symbol):
        self.declaration = declaration
        self.datatype = datatype
        self.category = category
        self.strategy = strategy
        self.symbol = symbol

    def __str__(self):
        return self.declaration.strip()

    __repr__ = __str__

class Syscall:

    def __init__(self, number, name):
        self.number = number
        self.name = name
        self.rettype = None
        self.args = []
        self.total_args = 0

    def get_is_placeholder(self):
        return self.name in PLACEHOLDER_SYSCALLS

    is_placeholder = property(get_is_placeholder)

    def get_unknown_args(self):
        return [a for a in self.args if a.strategy is None]

    unknown_args = property(get_unknown_args)

    def __str__(self):
        args = ", ".join([str(a) for a in self.args])
        fmt = "{number} {rettype} {name}({args})"
        return fmt.format(number=self.number, rettype=self.rettype,
                          name=self.name, args=args)

    __repr__ = __str__

def assemble(number, name, rettype, declarations, count):
    if len(ARG_SYMBOLS) < count:
        raise TooManyArguments(name, count)
    assert len(declarations) == count

    syscall = Syscall(number, name)
    syscall.rettype = rettype
    for declaration, symbol in zip(declarations, ARG_SYMBOLS):
        datatype, category, strategy = classify(declaration)
        if strategy is None:
            warn("{name}: unknown argument type: {datatype}".format(**locals()))
        a = Argument(declaration, datatype, category, strategy, symbol)
        syscall.args.append(a)
    syscall.total_args = count

    return syscall

def parse_record(record):
    proto = drop_annotations(extract_prototype(record))
    name = extract_syscall_name(proto)
    if name == "":
        return None
    number = extract_syscall_number(record)
    if name in PLACEHOLDER_SYSCALLS:
        return Syscall(number, name)

    count = count_args(proto)
    declarations = split_args(proto, count)
    return assemble(number, name, extract_return_type(proto), declarations,
                    count)

# vim: tabstop=4 shiftwidth=4 expandtab softtabstop=4 filetype=python
