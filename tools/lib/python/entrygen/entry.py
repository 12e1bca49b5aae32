
from os.path import join

from entrygen.share import TEMPLATE_DIR, apply_template, make_entry_name

STATUS_ON = "ON"

def make_arg_lines(syscall):
    lines = []
    for a in syscall.args:
        symbol = a.symbol
        if a.strategy is None:
            datatype = a.datatype
            fmt = "\t/* {symbol}: unknown type \"{datatype}\" */"
            lines.append(fmt.format(**locals()))
            continue
        category = a.category.symbol
        reference = a.strategy.reference
        lines.append("""\
\t.arg_type_array[{symbol}] = {category},
\t.get_arg_array[{symbol}] = {reference},""".format(**locals()))
    return "\n".join(lines)

def write_entry(dirpath, syscall, tmpl_dir=TEMPLATE_DIR):
    d = {
            "ENTRY": make_entry_name(syscall.name),
            "NAME": syscall.name,
            "NUMBER": str(syscall.number),
            "RETTYPE": syscall.rettype,
            "TOTAL_ARGS": str(syscall.total_args),
            "STATUS": STATUS_ON,
            "ARGS": make_arg_lines(syscall) }
    path = join(dirpath, d["ENTRY"] + ".c")
    apply_template(d, path, "entry.c.in", tmpl_dir)
    return path

# vim: tabstop=4 shiftwidth=4 expandtab softtabstop=4 filetype=python
