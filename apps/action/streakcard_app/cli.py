"""CLI entrypoints for card generation, offline rendering and theme tooling."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, fields, replace
from pathlib import Path

from streakcard_core import (
    ActionConfig,
    ConfigError,
    GitHubClient,
    load_action_config,
    load_config_file,
    validate_action_config,
)
from streakcard_core.logging_setup import configure_logging, get_logger
from streakcard_renderer import (
    CardOptions,
    StreakCardData,
    StreakCardError,
    generate_streak_card,
    generate_theme_preview,
    get_theme_stats,
    get_themes_by_category,
    list_themes,
    palette_sheet_png,
    resolve_theme_with_status,
    search_themes,
)

logger = get_logger("cli")

_DATA_FIELDS = {f.name for f in fields(StreakCardData)}


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _load_config(args: argparse.Namespace) -> ActionConfig:
    cfg = load_action_config()
    if getattr(args, "config", None):
        cfg = load_config_file(Path(args.config).expanduser(), base=cfg)

    card = cfg.card
    if getattr(args, "theme", None):
        card = replace(card, theme=args.theme)
    if getattr(args, "locale", None):
        card = replace(card, locale=args.locale)
    cfg.card = card
    if getattr(args, "username", None):
        cfg.username = args.username
    if getattr(args, "output", None):
        cfg.output_path = args.output
    return cfg


def _load_data(path: str) -> StreakCardData:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must hold a JSON object")

    values = {k: v for k, v in raw.items() if k in _DATA_FIELDS}
    try:
        return StreakCardData(**values)
    except TypeError as exc:
        raise ConfigError(f"{path} is missing streak fields: {exc}") from exc


def _warn_unknown_theme(name: str) -> None:
    resolution = resolve_theme_with_status(name)
    if not resolution.found:
        logger.warning("theme %r not found, using %r", name, resolution.resolved_name)


def _setup_logging(args: argparse.Namespace, json_output: bool) -> None:
    configure_logging(
        json_output=json_output,
        level=args.log_level,
        log_file=Path(args.log_file).expanduser() if args.log_file else None,
    )


def _write_text(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def cmd_generate(args: argparse.Namespace) -> int:
    cfg = _load_config(args)
    if cfg.log_json and not args.log_json:
        _setup_logging(args, json_output=True)
    validate_action_config(cfg)

    logger.info("generating streak card for %s", cfg.username)
    logger.info("theme=%s locale=%s output=%s", cfg.card.theme, cfg.card.locale, cfg.output_path)
    _warn_unknown_theme(cfg.card.theme)

    data = GitHubClient(cfg.token or "").fetch_streak_data(cfg.username or "")
    logger.info(
        "total=%d current=%d longest=%d",
        data.total_contributions,
        data.current_streak,
        data.longest_streak,
        extra={"event": "streak_fetched"},
    )

    out = _write_text(Path(cfg.output_path).expanduser().resolve(), generate_streak_card(data, cfg.card))
    logger.info("saved streak card to %s", out, extra={"event": "card_written"})
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    cfg = _load_config(args)
    data = _load_data(args.data)
    _warn_unknown_theme(cfg.card.theme)

    svg = generate_streak_card(data, cfg.card)
    if args.output:
        out = _write_text(Path(args.output).expanduser(), svg)
        logger.info("saved streak card to %s", out, extra={"event": "card_written"})
    else:
        print(svg)
    return 0


def cmd_themes_list(_args: argparse.Namespace) -> int:
    _print_json(list_themes())
    return 0


def cmd_themes_search(args: argparse.Namespace) -> int:
    _print_json(search_themes(args.pattern))
    return 0


def cmd_themes_category(args: argparse.Namespace) -> int:
    _print_json(get_themes_by_category(args.prefix))
    return 0


def cmd_themes_stats(_args: argparse.Namespace) -> int:
    _print_json(asdict(get_theme_stats()))
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    data = _load_data(args.data)
    names = args.theme or list_themes()
    out_dir = Path(args.out_dir).expanduser()

    written = {}
    for name, svg in generate_theme_preview(data, names, CardOptions(locale=args.locale or "en")).items():
        written[name] = str(_write_text(out_dir / f"{name}.svg", svg))
    _print_json(written)
    return 0


def cmd_palette(args: argparse.Namespace) -> int:
    names = args.theme or list_themes()
    out = Path(args.out).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(palette_sheet_png(names))
    _print_json({"path": str(out), "themes": len(names)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="streakcard", description="GitHub streak card generator and theme tools")
    parser.add_argument("--log-json", action="store_true", help="Emit JSON log lines")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--log-file", default=None, help="Optional rotating log file")
    sub = parser.add_subparsers(dest="command", required=True)

    gen_cmd = sub.add_parser("generate", help="Fetch contributions and write the card")
    gen_cmd.add_argument("--config", default=None, help="JSON settings file layered over INPUT_* variables")
    gen_cmd.add_argument("--username", default=None)
    gen_cmd.add_argument("--theme", default=None)
    gen_cmd.add_argument("--locale", default=None)
    gen_cmd.add_argument("--output", default=None, help="Output SVG path")
    gen_cmd.set_defaults(func=cmd_generate)

    render_cmd = sub.add_parser("render", help="Render a card from saved streak data")
    render_cmd.add_argument("--data", required=True, help="Path to streak data JSON")
    render_cmd.add_argument("--config", default=None)
    render_cmd.add_argument("--theme", default=None)
    render_cmd.add_argument("--locale", default=None)
    render_cmd.add_argument("--output", default=None, help="Output SVG path (stdout when omitted)")
    render_cmd.set_defaults(func=cmd_render)

    themes_cmd = sub.add_parser("themes", help="Inspect the theme registry")
    themes_sub = themes_cmd.add_subparsers(dest="themes_cmd", required=True)
    themes_sub.add_parser("list", help="List theme names").set_defaults(func=cmd_themes_list)
    search_cmd = themes_sub.add_parser("search", help="Themes whose name contains a pattern")
    search_cmd.add_argument("pattern")
    search_cmd.set_defaults(func=cmd_themes_search)
    category_cmd = themes_sub.add_parser("category", help="Themes whose name starts with a prefix")
    category_cmd.add_argument("prefix")
    category_cmd.set_defaults(func=cmd_themes_category)
    themes_sub.add_parser("stats", help="Registry statistics").set_defaults(func=cmd_themes_stats)

    preview_cmd = sub.add_parser("preview", help="Write one card per theme")
    preview_cmd.add_argument("--data", required=True, help="Path to streak data JSON")
    preview_cmd.add_argument("--out-dir", required=True)
    preview_cmd.add_argument("--theme", action="append", default=None, help="Repeatable; all themes when omitted")
    preview_cmd.add_argument("--locale", default=None)
    preview_cmd.set_defaults(func=cmd_preview)

    palette_cmd = sub.add_parser("palette", help="Write a PNG sheet of theme palettes")
    palette_cmd.add_argument("--out", required=True)
    palette_cmd.add_argument("--theme", action="append", default=None, help="Repeatable; all themes when omitted")
    palette_cmd.set_defaults(func=cmd_palette)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args, json_output=args.log_json)
    try:
        return int(args.func(args))
    except (StreakCardError, OSError) as exc:
        logger.error("action failed: %s", exc, extra={"event": "action_failed"})
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
