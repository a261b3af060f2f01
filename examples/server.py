"""Minimal example: read the database host for one environment."""

import sys

import configs


def main(argv: list[str]) -> int:
    filename = argv[1] if len(argv) > 1 else "config.json"
    environment = argv[2] if len(argv) > 2 else "development"

    cfg = configs.load(filename)
    env = cfg.get_config(environment)

    host = env.get_str_or_default("database.host", "localhost")
    port = env.get_int_or_default("database.port", 5432)
    print(f"Database host is {host}:{port}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
