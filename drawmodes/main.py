from drawmodes import config
from drawmodes.engine import Engine
from drawmodes.logging_config import setup_logging


def main() -> None:
    cfg = config.load_config()
    setup_logging(cfg.log_level, cfg.log_file or None)
    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
