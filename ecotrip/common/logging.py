import logging
from pathlib import Path


def configure_logging(log_dir: str | None = None, level: int = logging.INFO) -> None:
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
    # basicConfig ignores handlers once the root logger has any
    if logging.getLogger().handlers:
        return
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir:
        handlers.append(logging.FileHandler(Path(log_dir) / "ecotrip.log", encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
    )
