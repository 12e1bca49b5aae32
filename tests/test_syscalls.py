
import pytest

from entrygen.datatype import ADDRESS, GENERATE_INT, GENERATE_PID,     \
                              GENERATE_POINTER, INTEGER, PID
from entrygen.share import ARG_SYMBOLS
from entrygen.syscalls import TooManyArguments, assemble, parse_record

def test_parse_record():
    syscall = parse_record("5 AUE_NULL ALL { int dummy_call(int a, char *b, pid_t c); }")
    assert syscall.number == 5
    assert syscall.name == "dummy_call"
    assert syscall.rettype == "int"
    assert syscall.total_args == len(syscall.args) == 3
    assert [(a.category, a.strategy) for a in syscall.args] == [
            (INTEGER, GENERATE_INT),
            (ADDRESS, GENERATE_POINTER),
            (PID, GENERATE_PID)]
    assert [a.symbol for a in syscall.args] == [
            "FIRST_ARG", "SECOND_ARG", "THIRD_ARG"]
    assert not syscall.is_placeholder
    assert str(syscall) == "5 int dummy_call(int a, char *b, pid_t c)"

def test_parse_record_without_arguments():
    syscall = parse_record("2\tAUE_FORK\tSTD\t{ int fork(void); }")
    assert syscall.name == "fork"
    assert syscall.args == []
    assert syscall.total_args == 0

def test_parse_record_with_one_argument():
    syscall = parse_record("6\tAUE_CLOSE\tALL\t{ int close(int fd); }")
    assert syscall.total_args == 1
    assert syscall.args[0].datatype == "int"

@pytest.mark.parametrize("name", ["nosys", "enosys"])
def test_parse_placeholder_record(name):
    syscall = parse_record("8\tAUE_NULL\tALL\t{ int %s(void); }   { old creat }" % name)
    assert syscall.is_placeholder
    assert syscall.number == 8
    assert syscall.args == []

def test_parse_malformed_record():
    assert parse_record("6\tAUE_NULL\tOBSOL\twait") is None

def test_parse_annotated_record():
    record = "3 AUE_READ STD|CAPENABLED { ssize_t read( int fd, _Out_writes_bytes_(nbyte) void *buf, size_t nbyte ); }"
    syscall = parse_record(record)
    assert syscall.rettype == "ssize_t"
    assert [a.datatype for a in syscall.args] == ["int", "void *", "size_t"]

def test_unknown_type_is_reported(capsys):
    syscall = parse_record("9 AUE_NULL ALL { int dummy_call(int a, frob_t b); }")
    assert syscall.total_args == 2
    assert syscall.args[1].category is None
    assert syscall.args[1].strategy is None
    assert syscall.unknown_args == [syscall.args[1]]
    err = capsys.readouterr().err
    assert "dummy_call" in err
    assert "frob_t" in err

def make_declarations(n):
    return ["int a%d" % i for i in range(n)]

def test_assemble_uses_every_symbol():
    declarations = make_declarations(len(ARG_SYMBOLS))
    syscall = assemble(1, "many", "int", declarations, len(declarations))
    assert [a.symbol for a in syscall.args] == list(ARG_SYMBOLS)
    assert syscall.args[-1].symbol == "TWELFTH_ARG"

def test_assemble_too_many_arguments():
    declarations = make_declarations(len(ARG_SYMBOLS) + 1)
    with pytest.raises(TooManyArguments) as e:
        assemble(1, "too_many", "int", declarations, len(declarations))
    assert e.value.name == "too_many"
    assert e.value.count == 13
    assert "too_many" in str(e.value)

def test_parse_record_too_many_arguments():
    args = ", ".join(make_declarations(13))
    with pytest.raises(TooManyArguments):
        parse_record("1 AUE_NULL ALL { int too_many(%s); }" % args)

# vim: tabstop=4 shiftwidth=4 expandtab softtabstop=4 filetype=python
