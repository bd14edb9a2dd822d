"""chmod/umask example for modemuncher"""

import os
import tempfile

from modemuncher import ErrnoException, apply_mode_spec, chmod, mode_to_string, stat, umask


def main():
    # Pure mode arithmetic
    for spec in ["a+rwx", "go-w", "u=rwx,g=rx,o=", "rwsr-x---", "0640", "=777"]:
        result = apply_mode_spec(0o644, spec)
        shown = oct(result) if isinstance(result, int) else result.name
        print(f"0o644 {spec!r:18} -> {shown}")

    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "script.sh")
        with open(path, "w") as f:
            f.write("#!/bin/sh\necho hello\n")

        print("\nFile stats:")
        stats = stat(path)
        print(f"  Type: {stats.type}")
        print(f"  Permissions: {stats.permissions}")

        print("\nMaking it executable...")
        mode = chmod(path, "u+x,go=rx")
        print(f"  Mode: {oct(mode)} ({mode_to_string(mode)})")

        print("\nTrying a bad mode...")
        try:
            chmod(path, "u*x")
        except ErrnoException as e:
            print(f"  {e}")

    print(f"\nCurrent umask allows: {umask()}")


if __name__ == "__main__":
    main()
