
from re import compile, search

RE_RECORD_HEAD = compile(r"^\d+")
RE_PROTO = compile(r"\{[^}]*\}")
RE_ARG_LIST = compile(r"\([^)]*\)")
RE_ANNOTATION = compile(r"\b_(?:In|Out|Inout|Contains)_\w*(?:\([^)]*\))?\s*")

def split_records(src):
    record = None
    for line in src.replace("\\\n", "").split("\n"):
        if RE_RECORD_HEAD.match(line) is not None:
            if record is not None:
                yield " ".join(record)
            record = [line.strip()]
            continue
        s = line.strip()
        if (record is None) or (s == "") or (s[0] in (";", "#")):
            continue
        record.append(s)
    if record is not None:
        yield " ".join(record)

def extract_prototype(record):
    m = RE_PROTO.search(record)
    return m.group() if m is not None else ""

def drop_annotations(proto):
    return RE_ANNOTATION.sub("", proto)

def extract_syscall_number(record):
    return int(RE_RECORD_HEAD.match(record).group())

def extract_syscall_name(proto):
    lpar = proto.find("(")
    if lpar == -1:
        return ""
    m = search(r"\w+$", proto[:lpar].rstrip())
    return m.group() if m is not None else ""

def extract_return_type(proto):
    end = proto.find(" ", 2)
    return proto[2:end] if end != -1 else proto[2:]

def extract_arg_list(proto):
    m = RE_ARG_LIST.search(proto)
    return m.group() if m is not None else ""

def is_void(arg_list):
    return arg_list[1:-1].strip() in ("void", "")

def count_args(proto):
    arg_list = extract_arg_list(proto)
    if is_void(arg_list):
        return 0
    return arg_list.count(",") + 1

def split_args(proto, count):
    arg_list = extract_arg_list(proto)
    if is_void(arg_list):
        return []

    args = []
    buf = ""
    for c in arg_list[1:]:
        if c == ")":
            args.append(buf)
            break
        if c == ",":
            args.append(buf)
            buf = ""
            continue
        buf += c
    assert len(args) == count
    return args

def get_pointer_arg_type(declaration):
    return declaration[:declaration.index("*") + 1]

def remove_arg_name(declaration):
    if "*" in declaration:
        return get_pointer_arg_type(declaration).strip()

    buf = ""
    for i, c in enumerate(declaration):
        if c == " ":
            # Every declaration but the first one follows ", ".
            if i in (0, 1):
                continue
            break
        buf += c
    return buf.strip()

# vim: tabstop=4 shiftwidth=4 expandtab softtabstop=4 filetype=python
