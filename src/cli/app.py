"""Typer CLI entrypoint for watch-log parsing."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import typer

from watchlog import __version__
from cli.commands import cache as cache_command
from cli.commands import config as config_command
from cli.common import (
    LogLevel,
    build_log_parser,
    configure_logging,
    emit_json,
    load_config_or_exit,
    open_cache,
    read_lines,
    resolve_log_level,
)
from core.config import get_settings
from scheduling.scheduler import SchedulerError
from services.watch_stats import WatchStats, format_summary


class Mode(str, Enum):
    unfinished = "unfinished"
    query = "query"
    all = "all"


app = typer.Typer(
    help="观看日志解析工具\n\n按配置的正则解析观看记录，并列出未看完或全部的剧集\n",
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    add_completion=True,
    options_metavar="[选项]",
    subcommand_metavar="命令 [参数]",
)
app.add_typer(cache_command.app, name="cache")
app.add_typer(config_command.app, name="config")


@app.callback()
def root(
    ctx: typer.Context,
    version_flag: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="输出版本信息",
    ),
    log_level: LogLevel | None = typer.Option(
        None,
        "-l",
        "--log-level",
        help="日志级别：error|warn|info|debug（默认 warn）",
    ),
) -> None:
    if version_flag:
        typer.echo(__version__)
        raise typer.Exit()
    configure_logging(resolve_log_level(log_level or get_settings().log_level))
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command(help="解析观看日志并输出观看状态")
def parse(
    filename: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        metavar="日志文件",
    ),
    config_path: Path | None = typer.Option(
        None,
        "-c",
        "--config-path",
        help="解析配置 YAML 路径（默认使用系统配置目录）",
    ),
    mode: Mode = typer.Option(
        Mode.unfinished,
        "-m",
        "--mode",
        help="unfinished：未看完的剧集；query：按名称查询；all：全部剧集",
    ),
    query_name: str | None = typer.Option(
        None,
        "-q",
        "--query-name",
        help="查询的名称（--mode query 时必填）",
    ),
    use_cache: bool = typer.Option(
        True,
        "--cache/--no-cache",
        help="使用解析缓存",
    ),
    json_out: bool = typer.Option(
        False,
        "--json",
        help="输出 JSON 结果",
    ),
) -> None:
    if mode == Mode.query and not query_name:
        raise typer.BadParameter("--mode query 需要 --query-name")

    settings = get_settings()
    config = load_config_or_exit(config_path, settings)
    cache = open_cache(settings.cache_dir) if use_cache and settings.cache_enabled else None
    parser = build_log_parser(config, cache=cache)

    try:
        lines = read_lines(filename)
    except UnicodeDecodeError as exc:
        typer.echo(f"Error: {filename} is not valid UTF-8: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    try:
        report = parser.parse_with_report(lines)
    except SchedulerError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    stats = WatchStats(report.records)
    if mode == Mode.unfinished:
        summaries = stats.unfinished()
    elif mode == Mode.all:
        summaries = stats.all()
    else:
        summaries = stats.query(query_name or "")

    if json_out:
        emit_json(
            {
                "mode": mode.value,
                "summaries": [
                    summary.model_dump(mode="json", exclude={"entries"})
                    for summary in summaries
                ],
                "unmatched_count": report.unmatched_count,
                "cache_hits": report.cache_hits,
                "cache_misses": report.cache_misses,
            }
        )
        return

    if mode == Mode.query:
        if not summaries:
            typer.echo(f"No record found for {query_name}")
            return
        typer.echo(f"Found {len(summaries)} matching records for {query_name}:")
    for summary in summaries:
        typer.echo(format_summary(summary, with_state=mode != Mode.unfinished))


def main() -> None:
    app()


__all__ = ["app", "main"]
