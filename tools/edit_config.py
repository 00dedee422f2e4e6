import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console

from config_editor.config import EditorConfig
from config_editor.editor.tree_edit import (
    AddItem, DeleteKey, Edit, EditError, SetNumber, SetString, SetValue, ToggleBool, get_node,
)
from config_editor.format_parser.core.config_value import ConfigValue, ValueType
from config_editor.session import ConfigSession, ConfigSessionError
from modules.files import config_file_lister, filename_base, read_file, write_file
from modules.report import print_comments, print_document, print_summary


#
# Configuration & Setup
#

@dataclass
class EditorOptions:
    """Command line options"""
    target: Path
    mod: Optional[str] = None
    sets: List[str] = field(default_factory=list)
    toggles: List[str] = field(default_factory=list)
    deletes: List[str] = field(default_factory=list)
    add_items: List[str] = field(default_factory=list)
    query: Optional[str] = None
    save: bool = False
    show_comments: bool = False
    log_file: Optional[Path] = None
    verbose: bool = False


def parse_arguments() -> EditorOptions:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Inspect and edit JSON, TOML, YAML and properties config files"
    )
    parser.add_argument(
        "target",
        type=Path,
        help="Config file, or a config directory when --mod is given"
    )
    parser.add_argument(
        "--mod",
        help="Mod name or jar filename; opens its first matching config file under target"
    )
    parser.add_argument(
        "--set",
        dest="sets",
        action="append",
        default=[],
        metavar="PATH=VALUE",
        help="Set a value (e.g. server.max-players=32)"
    )
    parser.add_argument(
        "--toggle",
        dest="toggles",
        action="append",
        default=[],
        metavar="PATH",
        help="Flip a boolean value"
    )
    parser.add_argument(
        "--delete",
        dest="deletes",
        action="append",
        default=[],
        metavar="PATH",
        help="Remove a key or array item"
    )
    parser.add_argument(
        "--add-item",
        dest="add_items",
        action="append",
        default=[],
        metavar="PATH",
        help="Append a default item to an array"
    )
    parser.add_argument(
        "--filter",
        dest="query",
        help="Only show keys containing this text"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write changes back to the file"
    )
    parser.add_argument(
        "--comments",
        dest="show_comments",
        action="store_true",
        help="List captured comments"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log output to this file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args()
    return EditorOptions(
        target=args.target,
        mod=args.mod,
        sets=args.sets,
        toggles=args.toggles,
        deletes=args.deletes,
        add_items=args.add_items,
        query=args.query,
        save=args.save,
        show_comments=args.show_comments,
        log_file=args.log_file,
        verbose=args.verbose
    )


def setup_logging(log_file: Optional[Path], verbose: bool) -> logging.Logger:
    """Setup logging"""
    log_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("config_editor")
    logger.setLevel(log_level)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        )
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )
    logger.addHandler(console_handler)

    return logger


#
# Editing Logic
#

def split_assignment(assignment: str) -> Tuple[str, str]:
    if '=' not in assignment:
        raise ValueError(f"Expected PATH=VALUE, got: {assignment}")
    path, value = assignment.split('=', 1)
    return path.strip(), value


def edit_for_assignment(node: ConfigValue, text: str) -> Edit:
    """Pick the edit matching the type of the node being set"""
    if node.type == ValueType.NUMBER:
        return SetNumber(text)
    if node.type == ValueType.STRING:
        return SetString(text)
    if node.type == ValueType.BOOLEAN:
        return SetValue(ConfigValue.boolean(text.strip().lower() in ('true', 'yes', 'on', '1')))
    return SetValue(ConfigValue.string(text))


def apply_edits(session: ConfigSession, options: EditorOptions, logger: logging.Logger) -> int:
    """Apply command line edits in order; returns the number applied"""
    applied = 0

    for assignment in options.sets:
        path, text = split_assignment(assignment)
        node = get_node(session.tree, path)  # type: ignore[arg-type]
        session.edit(path, edit_for_assignment(node, text))
        applied += 1

    for path in options.toggles:
        session.edit(path, ToggleBool())
        applied += 1

    for path in options.add_items:
        session.edit(path, AddItem())
        applied += 1

    for path in options.deletes:
        session.edit(path, DeleteKey())
        applied += 1

    logger.debug(f"Applied {applied} edits")
    return applied


def open_session(options: EditorOptions) -> ConfigSession:
    if options.mod:
        session = ConfigSession(
            read_file, write_file,
            list_candidates=config_file_lister(options.target),
            config=EditorConfig()
        )
        session.open_mod(options.mod, filename_base(options.mod))
    else:
        session = ConfigSession(read_file, write_file, config=EditorConfig())
        session.select_file(str(options.target))
    return session


#
# Main Program Flow
#

def main() -> int:
    """Main entry point"""
    options = parse_arguments()
    logger = setup_logging(options.log_file, options.verbose)
    console = Console()

    try:
        if not options.target.exists():
            logger.error(f"Invalid target path: {options.target}")
            return 1

        session = open_session(options)
        if session.path is None:
            logger.error(f"No config files found for {options.mod}")
            return 1

        has_edits = options.sets or options.toggles or options.deletes or options.add_items
        if has_edits:
            if not session.structural:
                logger.error(f"Cannot edit {session.path} structurally: {session.parse_error or 'raw text only'}")
                return 1
            apply_edits(session, options, logger)

        print_summary(session, console)
        if options.show_comments:
            print_comments(session.comments, console)
        print_document(session, console, options.query)

        if options.save:
            if session.save():
                logger.info(f"Saved {session.path}")
            else:
                logger.info("No changes to save")

        return 0

    except (ConfigSessionError, EditError, ValueError) as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
