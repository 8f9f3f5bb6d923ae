"""Minimal example for FormSource with uploaded file references."""

import io

from formtree import FileRef, FormSource


def main() -> None:
    """Combine decoded form fields and files into one tree."""
    fields = [("title", "Quarterly report"), ("docs[0][label]", "draft"), ("docs[1][label]", "final")]
    files = [
        ("docs[0][file]", FileRef("draft.pdf", 1024, "application/pdf", io.BytesIO(b"%PDF"))),
        ("docs[1][file]", FileRef("final.pdf", 2048, "application/pdf", io.BytesIO(b"%PDF"))),
    ]
    source = FormSource(fields, files)
    print("tree:", source.to_dict())
    print("json:", source.to_json())


if __name__ == "__main__":
    main()
