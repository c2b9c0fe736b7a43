"""
must — I/O and serialization calls that cannot fail quietly.

    import must

    data = must.read_file("input.bin")          # bytes, or the process ends
    must.write_file("output.bin", data)

    must.configure(must.policy.panic())         # raise MustError instead
    m = must.Must(must.policy.panic())          # or inject a context
"""

from must import policy
from must import lift
from must._errors import MustError, describe
from must._must import Must
from must._global import (
    configure,
    current,
    abort,
    abort_if,
    no_err,
    fatal_if,
    panic_if,
    ok,
    open,
    create,
    open_file,
    close,
    seek,
    stat,
    sync,
    truncate,
    stat_path,
    remove,
    rename,
    truncate_path,
    temp_file,
    temp_dir,
    read_dir,
    read,
    read_full,
    read_all,
    read_file,
    write,
    write_at,
    write_file,
    encode,
    decode,
    marshal_json,
    unmarshal_json,
    atoi,
)
from must._types import (
    Result,
    Ok,
    Error,
    AbortPolicy,
    Reader,
    Writer,
    Seeker,
    Closer,
    Truncater,
    Fileno,
    WriterAt,
    Encoder,
    Decoder,
)

__version__ = "0.1.0"

__all__ = (
    "policy",
    "lift",
    "Must",
    "MustError",
    "describe",
    # Active context
    "configure",
    "current",
    "abort",
    "abort_if",
    "no_err",
    "fatal_if",
    "panic_if",
    "ok",
    # Wrappers
    "open",
    "create",
    "open_file",
    "close",
    "seek",
    "stat",
    "sync",
    "truncate",
    "stat_path",
    "remove",
    "rename",
    "truncate_path",
    "temp_file",
    "temp_dir",
    "read_dir",
    "read",
    "read_full",
    "read_all",
    "read_file",
    "write",
    "write_at",
    "write_file",
    "encode",
    "decode",
    "marshal_json",
    "unmarshal_json",
    "atoi",
    # Types
    "Result",
    "Ok",
    "Error",
    "AbortPolicy",
    "Reader",
    "Writer",
    "Seeker",
    "Closer",
    "Truncater",
    "Fileno",
    "WriterAt",
    "Encoder",
    "Decoder",
)
