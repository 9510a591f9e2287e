"""
Main entry point for the Word Trainer.

Command-line interface for adding, practicing, importing and reviewing words.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from .config import Config
from .errors import error_handler, WordTrainerError
from .importers import import_words
from .messages import delete_confirmation_message
from .models import WordFilter, OutcomeKind
from .practice import EditCommand, PracticeAttemptCommand, feedback_message, pick_random_word
from .settings import SettingsManager, UserSettings
from .stats import summarize
from .store import JsonWordStore

FILTER_CHOICES = [word_filter.name.lower() for word_filter in WordFilter]


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def format_word(word) -> str:
    """One line of the word list."""
    status = "✓ Mastered" if word.mastered else "· To practice"
    return f"{word.id[:8]}  {word.native} → {word.foreign}  ⭐ {word.score}  {status}"


def resolve_word_id(store, prefix: str) -> str:
    """Expand a (possibly shortened) word id as printed by ``list``."""
    matches = [word.id for word in store.all_words() if word.id.startswith(prefix)]
    if len(matches) == 1:
        return matches[0]
    # Unknown or ambiguous ids are reported by the store lookup
    return prefix


def cmd_list(args, store, settings_manager) -> int:
    settings = settings_manager.load()
    word_filter = WordFilter.parse(args.filter, default=settings.word_filter)
    words = store.list_words(word_filter, search=args.search)

    title = "All Words" if word_filter is WordFilter.ALL else word_filter.value
    print(f"{title} ({len(words)})")
    print("=" * 50)
    for word in words:
        print(format_word(word))
    return 0


def cmd_add(args, store, settings_manager) -> int:
    word = store.create(args.native, args.foreign)
    print(f"✓ Added {word.native} → {word.foreign} ({word.id[:8]})")
    return 0


def cmd_edit(args, store, settings_manager) -> int:
    word_id = resolve_word_id(store, args.word_id)
    current = store.get(word_id)
    command = EditCommand(
        native=args.native if args.native is not None else current.native,
        foreign=args.foreign if args.foreign is not None else current.foreign,
        score=args.score,
        mastered=args.mastered
    )
    word = command.execute(store, word_id)
    print(f"✓ Saved {format_word(word)}")
    return 0


def cmd_delete(args, store, settings_manager) -> int:
    # Repeated ids (or prefixes of the same id) name one word
    resolved = dict.fromkeys(resolve_word_id(store, word_id) for word_id in args.word_ids)
    words = [store.get(word_id) for word_id in resolved]

    if not args.yes:
        print(delete_confirmation_message(words))
        response = input("Delete? [y/N]: ").strip().lower()
        if response not in ['y', 'yes']:
            print("Deletion cancelled.")
            return 0

    deleted = store.delete([word.id for word in words])
    print(f"✓ Deleted {deleted} word(s)")
    return 0


def cmd_practice(args, store, settings_manager) -> int:
    if args.word_id:
        word = store.get(resolve_word_id(store, args.word_id))
    else:
        word_filter = settings_manager.load().word_filter
        word = pick_random_word(store.list_words(word_filter))
        if word is None:
            print("No words to practice. Add some words or change the filter.")
            return 1

    print("Translate to foreign:")
    print(f"  {word.native}")

    answer = args.answer
    while True:
        if answer is None:
            try:
                answer = input("> ")
            except EOFError:
                return 1

        outcome, updated = PracticeAttemptCommand(answer=answer).execute(store, word.id)
        print(feedback_message(outcome))
        if outcome.kind is not OutcomeKind.NEEDS_INPUT:
            print(f"Score: {updated.score}")
            return 0
        if args.answer is not None:
            return 1
        answer = None


def cmd_import(args, store, settings_manager) -> int:
    try:
        data = args.file.read_bytes()
    except OSError as e:
        print(f"❌ Could not read {args.file}: {e}")
        return 1

    result = import_words(store, data, source=str(args.file))
    if not result.success:
        print(f"❌ {result.error}")
        return 1

    print(f"✓ Imported {result.imported} word(s) from {args.file}")
    return 0


def cmd_stats(args, store, settings_manager) -> int:
    summary = summarize(store.all_words())
    settings = settings_manager.load()

    print("Summary")
    print("=" * 50)
    print(f"Total words: {summary.total}")
    print(f"Mastered:    {summary.mastered}")
    print(f"To learn:    {summary.to_learn}")
    print(f"Avg. score:  {summary.average_score:.2f}")
    print(f"Daily goal:  {settings.daily_target} words")

    if summary.learned_per_month:
        print("\nLearned per month")
        for month, count in summary.learned_per_month.items():
            print(f"  {month}  {'█' * count} {count}")
    return 0


def cmd_settings(args, store, settings_manager) -> int:
    settings = settings_manager.load()
    if args.filter is not None or args.daily_target is not None:
        settings = UserSettings(
            word_filter=WordFilter.parse(args.filter, default=settings.word_filter),
            daily_target=args.daily_target if args.daily_target is not None else settings.daily_target
        )
        settings_manager.save(settings)
        print("✓ Settings saved")

    print(f"Filter:       {settings.word_filter.value}")
    print(f"Daily target: {settings.daily_target} words per day")
    return 0


def cmd_serve(args, store, settings_manager) -> int:
    from .web.app import create_app

    app = create_app(store=store, settings_manager=settings_manager)

    # Security: Only bind to localhost when debug mode is enabled
    # to prevent exposing the interactive debugger to the network
    debug_mode = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'
    host = '127.0.0.1' if debug_mode else args.host
    print(f"Starting server at http://{host}:{args.port}")
    print("Press Ctrl+C to stop the server")
    app.run(debug=debug_mode, host=host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per action."""
    parser = argparse.ArgumentParser(
        prog="word-trainer",
        description="Practice foreign vocabulary from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s add House Maison
  %(prog)s list --filter to_practice
  %(prog)s practice            # random word from the saved filter
  %(prog)s import words.csv    # two columns: native,foreign
  %(prog)s stats
        """
    )

    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding words.json and settings.json (default: %s)" % Config.DATA_DIR
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List words")
    list_parser.add_argument("--filter", choices=FILTER_CHOICES, help="Which words to show (default: saved filter)")
    list_parser.add_argument("--search", help="Only words containing this text")
    list_parser.set_defaults(handler=cmd_list)

    add_parser = subparsers.add_parser("add", help="Add a word")
    add_parser.add_argument("native", help="Word in your own language")
    add_parser.add_argument("foreign", help="Translation you are learning")
    add_parser.set_defaults(handler=cmd_add)

    edit_parser = subparsers.add_parser("edit", help="Edit a word")
    edit_parser.add_argument("word_id", help="Word id (a unique prefix is enough)")
    edit_parser.add_argument("--native", help="New native word")
    edit_parser.add_argument("--foreign", help="New foreign word")
    edit_parser.add_argument("--score", type=int, help="New score")
    mastered_group = edit_parser.add_mutually_exclusive_group()
    mastered_group.add_argument("--mastered", dest="mastered", action="store_const", const=True, help="Mark as mastered")
    mastered_group.add_argument("--not-mastered", dest="mastered", action="store_const", const=False, help="Mark as to practice")
    edit_parser.set_defaults(handler=cmd_edit, mastered=None)

    delete_parser = subparsers.add_parser("delete", help="Delete one or more words")
    delete_parser.add_argument("word_ids", nargs="+", help="Word ids (unique prefixes are enough)")
    delete_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation prompt")
    delete_parser.set_defaults(handler=cmd_delete)

    practice_parser = subparsers.add_parser("practice", help="Practice a word")
    practice_parser.add_argument("word_id", nargs="?", help="Word id (random word when omitted)")
    practice_parser.add_argument("--answer", help="Answer non-interactively")
    practice_parser.set_defaults(handler=cmd_practice)

    import_parser = subparsers.add_parser("import", help="Import words from a CSV file")
    import_parser.add_argument("file", type=Path, help="CSV file with native,foreign columns")
    import_parser.set_defaults(handler=cmd_import)

    stats_parser = subparsers.add_parser("stats", help="Show progress statistics")
    stats_parser.set_defaults(handler=cmd_stats)

    settings_parser = subparsers.add_parser("settings", help="Show or change settings")
    settings_parser.add_argument("--filter", choices=FILTER_CHOICES, help="Default word filter")
    settings_parser.add_argument("--daily-target", type=int, help="Words per day goal (1-100)")
    settings_parser.set_defaults(handler=cmd_settings)

    serve_parser = subparsers.add_parser("serve", help="Run the JSON API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get('FLASK_PORT', '3000')), help="Port to bind")
    serve_parser.set_defaults(handler=cmd_serve)

    return parser


def main(argv=None):
    """Run the command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    data_dir = Config.ensure_directories(args.data_dir)
    store = JsonWordStore(Config.words_path(data_dir))
    settings_manager = SettingsManager(Config.settings_path(data_dir))
    logger.debug(f"Using data directory {data_dir}")

    try:
        return args.handler(args, store, settings_manager)
    except WordTrainerError as e:
        processing_error = e.processing_error
        print(f"❌ {processing_error.message}")
        if processing_error.details:
            print(f"   {processing_error.details}")
        if processing_error.suggested_actions:
            print(f"   Suggestion: {processing_error.suggested_actions[0]}")
        if args.verbose and error_handler.has_errors():
            summary = error_handler.get_error_summary()
            logger.debug(f"{summary['error_count']} error(s) recorded this run")
        return 1


if __name__ == "__main__":
    sys.exit(main())
