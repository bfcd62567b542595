import os
import json


def list_pdfs_in_directory(directory_path):
    """PDF file names in a directory, sorted, extension matched case-insensitively."""
    return sorted(f for f in os.listdir(directory_path)
                  if os.path.splitext(f)[1].lower() == ".pdf")


def output_name(pdf_filename):
    return os.path.splitext(pdf_filename)[0] + ".json"


def save_json(data, output_path):
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def ensure_directory(path):
    os.makedirs(path, exist_ok=True)
