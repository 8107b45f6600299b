from __future__ import annotations

import json
import logging

from kungfu import Nothing, Option, Some

from tryoption import TryOption, lift as L

CONFIG = '{"port": "8080", "workers": "four"}'


def read_setting(raw: str, key: str) -> Option[str]:
    # Locality: plain function returning Option, no TryOption here.
    value = json.loads(raw).get(key)
    return Nothing() if value is None else Some(value)


def setting(key: str) -> TryOption[int]:
    return TryOption(lambda: read_setting(CONFIG, key)).map(int)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    for key in ("port", "workers", "timeout"):
        message = setting(key).match(
            some=lambda v: f"{key} = {v}",
            none=lambda: f"{key} not set",
            fail=lambda e: f"{key} invalid: {e}",
        )
        print(message)

    port = L.down.recover_value(setting("port"), 80)
    workers = setting("workers").recover_value(1)
    print(f"port={port} workers={workers}")

    address = setting("port").select_many(
        lambda p: L.up.optional("localhost" if p > 1024 else None),
        lambda p, host: f"{host}:{p}",
    )
    print(address())


if __name__ == "__main__":
    main()
