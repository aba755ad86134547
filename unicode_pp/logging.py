from logging import (
    ERROR,
    WARN,
    Filter,
    LogRecord,
    StreamHandler,
    captureWarnings,
    getLogger,
)
from sys import stdout

log = getLogger("unicode_pp")


class _Quiet(Filter):
    def filter(self, record: LogRecord) -> bool:
        return record.levelno < ERROR


_out = StreamHandler(stream=stdout)
_out.addFilter(_Quiet())
_err = StreamHandler()
_err.setLevel(ERROR)


log.addHandler(_out)
log.addHandler(_err)
log.setLevel(WARN)
log.propagate = False
captureWarnings(True)
