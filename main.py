import logging
import os
from concurrent.futures import ProcessPoolExecutor, as_completed

import fitz  # PyMuPDF
from tqdm import tqdm

from config import PipelineConfig, parse_args
from line_builder import Y_TOLERANCE, build_page_groups
from line_normalizer import normalize_line
from models import OutlineResult
from outline_builder import build_outline
from span_extractor import extract_fragments
from utils import list_pdfs_in_directory, save_json, ensure_directory, output_name

logger = logging.getLogger(__name__)


def extract_lines(pages, tolerance=Y_TOLERANCE, anchor="previous"):
    lines = []
    for page_number, group in build_page_groups(pages, tolerance, anchor):
        line = normalize_line(group, page_number)
        if line is not None:
            lines.append(line)
    return lines


def extract_outline(pdf_path, tolerance=Y_TOLERANCE, anchor="previous"):
    with fitz.open(pdf_path) as doc:
        pages = extract_fragments(doc)
    lines = extract_lines(pages, tolerance, anchor)
    logger.debug("%s: %d lines over %d pages", pdf_path, len(lines), len(pages))
    return build_outline(lines)


def process_pdf(pdf_path, output_dir, tolerance=Y_TOLERANCE, anchor="previous"):
    """Write the outline JSON for one PDF; on failure write the error fallback."""
    filename = os.path.basename(pdf_path)
    output_path = os.path.join(output_dir, output_name(filename))
    try:
        result = extract_outline(pdf_path, tolerance, anchor)
        save_json(result.to_dict(), output_path)
    except Exception as e:
        logger.error(f"Failed to process {filename}: {e}")
        save_json(OutlineResult.error(filename).to_dict(), output_path)
        return False

    logger.info(f"{filename} -> {len(result.outline)} headings")
    return True


def run(config: PipelineConfig):
    summary = {"total": 0, "succeeded": 0, "failed": 0}

    if not os.path.isdir(config.input_dir):
        logger.error(f"Input directory not found: {config.input_dir}")
        return summary

    ensure_directory(config.output_dir)
    pdf_files = list_pdfs_in_directory(config.input_dir)
    if not pdf_files:
        logger.warning(f"No PDF files found in {config.input_dir}")
        return summary

    summary["total"] = len(pdf_files)
    pdf_paths = [os.path.join(config.input_dir, f) for f in pdf_files]

    args = (config.output_dir, config.y_tolerance, config.anchor)
    if config.workers == 1:
        results = [process_pdf(p, *args) for p in tqdm(pdf_paths, desc="Extracting outlines")]
    else:
        # PyMuPDF is not thread safe, so documents go to separate processes.
        with ProcessPoolExecutor(max_workers=config.workers) as executor:
            futures = [executor.submit(process_pdf, p, *args) for p in pdf_paths]
            results = [f.result() for f in tqdm(as_completed(futures), total=len(futures),
                                                 desc="Extracting outlines")]

    summary["succeeded"] = sum(1 for ok in results if ok)
    summary["failed"] = summary["total"] - summary["succeeded"]
    logger.info(f"Processing complete: {summary['succeeded']} successful, {summary['failed']} failed")
    return summary


def main(argv=None):
    config = parse_args(argv)
    logging.basicConfig(level=config.log_level,
                        format='%(asctime)s - %(levelname)s - %(message)s')
    logger.info(f"Extracting outlines from {config.input_dir} into {config.output_dir}")
    run(config)
    logger.info("Extraction process finished.")


if __name__ == "__main__":
    main()
