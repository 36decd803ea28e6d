from guide_index.samples import write_sample_guides
from guide_index.settings import load_settings


def main() -> None:
    """Write the bundled C and Verilog guides to the configured guides directory."""
    guide_settings, _ = load_settings()
    paths = write_sample_guides(output_dir=guide_settings.guides_dir, suffix=guide_settings.guide_suffix)
    print("Wrote " + ", ".join(str(path) for path in paths))


if __name__ == "__main__":
    main()
