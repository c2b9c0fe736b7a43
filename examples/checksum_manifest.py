"""
Checksum manifest — a short-lived tool that must not limp on after I/O errors.

Key concepts:
- Module-level wrappers use the process-wide policy (fatal by default)
- must.configure(...) swaps the policy once, before any work starts
- A Must context can be injected instead of touching global state

Usage:
    python -m examples.checksum_manifest DIR [--panic]
"""

import hashlib
import json
import os
import sys

import must


def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


# ═══════════════════════════════════════════════════════════════════════════════
# 1. Plain script style — every call either succeeds or ends the process
# ═══════════════════════════════════════════════════════════════════════════════


def digest(path: str) -> str:
    f = must.open(path)
    h = hashlib.sha256()
    buf = bytearray(64 * 1024)
    while n := must.read(f, buf):
        h.update(buf[:n])
    must.close(f)
    return h.hexdigest()


def build_manifest(root: str) -> dict[str, str]:
    return {
        entry.name: digest(entry.path)
        for entry in must.read_dir(root)
        if entry.is_file() and entry.name != "MANIFEST.json"
    }


def write_manifest(root: str, manifest: dict[str, str]) -> str:
    # write next to the target and rename so readers never see a partial file
    tmp = must.temp_file(root, ".manifest-")
    must.write(tmp, json.dumps(manifest, indent=2, sort_keys=True).encode())
    must.sync(tmp)
    must.close(tmp)
    target = os.path.join(root, "MANIFEST.json")
    must.rename(tmp.name, target)
    return target


# ═══════════════════════════════════════════════════════════════════════════════
# 2. Injected context — same wrappers, explicit policy
# ═══════════════════════════════════════════════════════════════════════════════


def verify(m: must.Must, root: str) -> bool:
    recorded = m.unmarshal_json(m.read_file(os.path.join(root, "MANIFEST.json")))
    return recorded == build_manifest(root)


def main(argv: list[str]) -> None:
    if not argv:
        print(__doc__, file=sys.stderr)
        raise SystemExit(2)
    root = argv[0]

    if "--panic" in argv:
        must.configure(must.policy.panic())

    banner("Building manifest")
    try:
        target = write_manifest(root, build_manifest(root))
    except must.MustError as exc:
        # only reachable with --panic; the default policy has already exited
        print(f"manifest skipped: {exc}")
        return
    print(f"wrote {target}")

    banner("Verifying")
    print("ok" if verify(must.Must(must.policy.panic()), root) else "MISMATCH")


if __name__ == "__main__":
    main(sys.argv[1:])
