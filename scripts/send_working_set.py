import argparse
import json

from ClipAI.brain.llm import AIService
from ClipAI.brain.profiles import ProfileStore
from ClipAI.clipboard.stores import ClipStores


def main():
    parser = argparse.ArgumentParser(description="Send the saved working set once with the selected AI profile.")
    parser.add_argument("--prompt", default=None, help="Override the profile prompt.")
    parser.add_argument("--image-out", default="ai_result.png", help="Where to write a returned image.")
    args = parser.parse_args()

    stores = ClipStores()
    stores.load_all()
    profile = ProfileStore().selected()
    prompt = args.prompt if args.prompt is not None else profile.custom_prompt

    outcome = AIService().send_request(items=stores.working_set.items, prompt=prompt, profile=profile)
    if not outcome.get("ok"):
        print(json.dumps({"ok": False, "error_code": outcome.get("error_code"), "error": outcome.get("error")}, ensure_ascii=False, indent=2))
        return 1

    result = outcome["result"]
    report = {"ok": True, "profile": profile.name, "text": result.text, "image": None}
    if result.image_data is not None:
        with open(args.image_out, "wb") as f:
            f.write(result.image_data)
        report["image"] = {"path": args.image_out, "mime_type": result.image_mime_type}
    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
