"""
CLI entry point for paper-importer

Usage:
    # Import a paper into the current directory's vault
    paper-importer import 2301.12345
    paper-importer import https://arxiv.org/abs/2301.12345 --vault ~/Notes

    # Use folders from a plugin-style settings file
    paper-importer import arXiv:2301.12345 --config data.json --open

    # Check an ID or URL without importing
    paper-importer extract arxiv.org/pdf/2301.12345
"""

import argparse
import logging
import sys
import webbrowser
from pathlib import Path
from urllib.parse import quote

from .config import DEFAULT_NOTE_FOLDER, DEFAULT_PDF_FOLDER, ImportSettings
from .core.errors import PaperImportError
from .core.identifier import extract_arxiv_id
from .importer import PaperImporter

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def open_in_obsidian(vault_path: Path, note_path: str) -> None:
    """
    Open a note in Obsidian through its URI scheme

    Args:
        vault_path: Vault root directory
        note_path: Vault-relative note path
    """
    vault = quote(Path(vault_path).resolve().name)
    uri = f"obsidian://open?vault={vault}&file={quote(note_path)}"
    logger.debug(f"Opening {uri}")
    webbrowser.open(uri)


def build_settings(args) -> ImportSettings:
    """Build import settings from a settings file and CLI overrides"""
    if args.config:
        settings = ImportSettings.from_json(args.config, vault_path=args.vault)
    else:
        settings = ImportSettings(vault_path=Path(args.vault))

    if args.pdf_folder is not None:
        settings.pdf_folder = args.pdf_folder
    if args.note_folder is not None:
        settings.note_folder = args.note_folder

    return settings


def cmd_import(args):
    """Import paper command"""
    try:
        settings = build_settings(args)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read settings: {e}")
        return 1

    opener = None
    if args.open:
        def opener(note_path):
            open_in_obsidian(settings.vault_path, note_path)

    importer = PaperImporter(settings, opener=opener)

    try:
        result = importer.import_paper(args.paper.strip())
    except PaperImportError as e:
        logger.error(str(e))
        return 1

    print(f"Note: {result.note_path}")
    print(f"PDF:  {result.pdf_path}")

    importer.open_note(result)
    return 0


def cmd_extract(args):
    """Extract arXiv ID command"""
    try:
        print(extract_arxiv_id(args.paper.strip()))
    except PaperImportError as e:
        logger.error(str(e))
        return 1
    return 0


def cli(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description='Import arXiv papers (PDF + Markdown note) into a vault',
        epilog='''
Examples:
  # Import by ID
  %(prog)s import 2301.12345

  # Import by URL into a specific vault
  %(prog)s import https://arxiv.org/abs/2301.12345 --vault ~/Notes

  # Validate an ID or URL
  %(prog)s extract arXiv:2301.12345
        ''',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Import command
    import_parser = subparsers.add_parser('import', help='Import a paper')
    import_parser.add_argument('paper',
                               help='arXiv ID, arXiv:ID, or arxiv.org abs/pdf URL')
    import_parser.add_argument('--vault', default='.',
                               help='Vault root directory')
    import_parser.add_argument('--pdf-folder', default=None,
                               help=f'Vault folder for PDFs (default: {DEFAULT_PDF_FOLDER})')
    import_parser.add_argument('--note-folder', default=None,
                               help=f'Vault folder for notes (default: {DEFAULT_NOTE_FOLDER})')
    import_parser.add_argument('--config', type=str,
                               help='JSON settings file with pdfFolder/noteFolder')
    import_parser.add_argument('--open', action='store_true',
                               help='Open the note in Obsidian afterwards')
    import_parser.add_argument('--debug', action='store_true',
                               help='Enable debug output')

    # Extract command
    extract_parser = subparsers.add_parser('extract', help='Print the arXiv ID of an ID or URL')
    extract_parser.add_argument('paper',
                                help='arXiv ID, arXiv:ID, or arxiv.org abs/pdf URL')
    extract_parser.add_argument('--debug', action='store_true',
                                help='Enable debug output')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.debug)

    commands = {
        'import': cmd_import,
        'extract': cmd_extract,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(cli())
