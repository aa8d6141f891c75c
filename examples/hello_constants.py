import logging

import numpy as np

import mathreg


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    constants = mathreg.ConstantsRegistry()
    constants.init()

    constants.define("tau", 2 * np.pi, description="Full turn")
    golden = constants.define("phi", (1 + np.sqrt(5)) / 2)

    for c in constants:
        kind = "system" if c.is_system else "user"
        print(f"{c.id:>3}  {c.name:<6} {c.value:<22} {kind}")

    # Redefining returns the resident entity, not the argument.
    assert constants.define("phi", 1.618) is golden
    print("names:", ", ".join(constants.get_names()))


if __name__ == "__main__":
    main()
