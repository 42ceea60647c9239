import json
import os
import sys

from ClipAI.config import config


def main(limit=40):
    path = os.path.abspath(str(getattr(config, "runtime_log_path", "ClipAI/data/runtime_events.jsonl")))
    if not os.path.exists(path):
        print("No event log found.")
        return
    rows = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            try:
                rows.append(json.loads(line))
            except ValueError:
                continue
    print(f"Runtime events: {len(rows)}")
    for row in rows[-limit:]:
        extra = {k: v for k, v in row.items() if k not in ("ts", "event", "session_id")}
        print(f"{row.get('ts')} [{str(row.get('session_id'))[:8]}] {row.get('event')}: {str(extra)[:180]}")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 40)
