from pathlib import Path

def mark_by_dir(items, base_dir, marker):
    base = Path(base_dir).resolve()
    for item in items:
        # pytest 7/8: item.path (Path) on new versions, item.fspath on old ones
        p = getattr(item, "path", None)
        p = Path(p) if p is not None else Path(str(getattr(item, "fspath")))
        try:
            p.resolve().relative_to(base)
        except ValueError:
            continue
        item.add_marker(marker)


class RecordingLogger:
    """LoggerPort fake that keeps (level, message, fields) tuples."""

    def __init__(self):
        self.records = []

    def debug(self, message, **fields):
        self.records.append(("debug", message, fields))

    def info(self, message, **fields):
        self.records.append(("info", message, fields))

    def warning(self, message, **fields):
        self.records.append(("warning", message, fields))

    def error(self, message, exc_info=False, **fields):
        self.records.append(("error", message, fields))

    def messages(self, level=None):
        return [m for (lvl, m, _) in self.records if level is None or lvl == level]

    def fields_for(self, message):
        return [f for (_, m, f) in self.records if m == message]
