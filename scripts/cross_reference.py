import logging
import sys

from guide_index.index import DocumentIndex
from guide_index.io_utils import ingest_directory
from guide_index.settings import load_settings
from guide_index.tracing import configure_tracing, get_tracer, traced_query


def main(symbols: list[str]) -> None:
    """Ingest the configured guides directory and print cross-references per symbol."""
    logging.basicConfig(level=logging.INFO)
    guide_settings, tracing_settings = load_settings()
    if tracing_settings.otlp_endpoint:
        configure_tracing(endpoint=tracing_settings.otlp_endpoint, service_name=tracing_settings.service_name)

    index = DocumentIndex()
    ingest_directory(index, guide_settings.guides_dir, suffix=guide_settings.guide_suffix)
    cross_reference = traced_query(index.cross_reference, get_tracer("guide-index.cli"), span_name="guide.cross_reference")

    for symbol in symbols:
        print(symbol)
        for fact in cross_reference(symbol):
            section = index.get_section(fact.guide_id, fact.source_section_id)
            print(f"  [{fact.guide_id}] {fact.category} in '{section.title}': {fact.description}")


if __name__ == "__main__":
    main(sys.argv[1:])
