
from os.path import join

from entrygen.share import PLACEHOLDER_SYSCALLS, TEMPLATE_DIR, \
                           apply_template, make_entry_name

def number_syscalls(names):
    a = []
    skipped = 0
    for i, name in enumerate(names):
        # Unimplemented slots shift every later syscall down by one.
        if name in PLACEHOLDER_SYSCALLS:
            skipped += 1
            continue
        a.append((make_entry_name(name), i - skipped))
    return a

def make_externs(numbered):
    fmt = "extern struct syscall_entry {name};"
    return "\n".join([fmt.format(name=name) for name, _ in numbered])

def make_table_entries(numbered):
    lines = []
    for i, (name, index) in enumerate(numbered):
        sep = "," if i < len(numbered) - 1 else ""
        lines.append("\t[{index}] = &{name}{sep}".format(**locals()))
    return "\n".join(lines)

def write_syscall_list(dirpath, names, tmpl_dir=TEMPLATE_DIR):
    d = { "EXTERNS": make_externs(number_syscalls(names)) }
    path = join(dirpath, "syscall_list.h")
    apply_template(d, path, "syscall_list.h.in", tmpl_dir)
    return path

def write_syscall_table(dirpath, platform, names, tmpl_dir=TEMPLATE_DIR):
    numbered = number_syscalls(names)
    d = {
            "PLATFORM": platform,
            "GUARD": platform.upper(),
            "TOTAL_SYSCALLS": str(len(numbered)),
            "ENTRIES": make_table_entries(numbered) }
    path = join(dirpath, "{platform}_table.h".format(**locals()))
    apply_template(d, path, "syscall_table.h.in", tmpl_dir)
    return path

# vim: tabstop=4 shiftwidth=4 expandtab softtabstop=4 filetype=python
