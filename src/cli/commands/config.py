"""Configuration inspection commands."""

from __future__ import annotations

from pathlib import Path

import typer

from cli.common import emit_json, load_config_or_exit
from core.config import get_settings
from persistence.hashing import pattern_set_digest


app = typer.Typer(
    help="配置查看与导出",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
    options_metavar="[选项]",
    subcommand_metavar="命令 [参数]",
)

_EXAMPLE_CONFIG = """\
# 按顺序匹配，先命中的规则生效；更具体的规则请放在前面。
# 可用的命名分组: name（必填）, episode, season, time_at_episode, logged_time, note
reg_pattern_list:
  - '^(?P<logged_time>\\d{4}-\\d{2}-\\d{2} \\d{2}:\\d{2}) (?P<name>.+?) 第(?P<season>\\S+?)季 第(?P<episode>\\S+?)集(?: (?P<time_at_episode>[\\d:]+))?'
  - '^(?P<name>.+?) 第(?P<episode>\\S+?)集(?: (?P<time_at_episode>[\\d:]+))?'
  - '^(?P<name>.+?) ep(?P<episode>\\d+)'
  - '^(?P<name>.+?)(?: #(?P<note>.*))?$'
# 任一规则命中即视为已看完
finished_reg_pattern_list:
  - '看完'
  - 'finished$'
max_thread_num: 4
min_task_num_per_thread: 64
"""


@app.command("show", help="查看当前生效配置")
def show_config(
    config_path: Path | None = typer.Option(
        None,
        "-c",
        "--config-path",
        help="解析配置 YAML 路径（默认使用系统配置目录）",
    ),
) -> None:
    settings = get_settings()
    config = load_config_or_exit(config_path, settings)
    payload = {
        "settings": settings.model_dump(mode="json"),
        "parser": config.model_dump(mode="json"),
        "pattern_set_digest": pattern_set_digest(
            config.reg_pattern_list, config.finished_reg_pattern_list
        ),
    }
    emit_json(payload)


@app.command("example", help="生成示例配置 YAML")
def write_example_config(
    output: Path = typer.Option(
        Path.cwd() / "config.yaml",
        "--output",
        help="输出文件路径（默认写入当前目录）",
    ),
    force: bool = typer.Option(False, "--force", help="覆盖已存在文件"),
) -> None:
    if output.exists() and not force:
        raise typer.BadParameter(f"文件已存在，请使用 --force 覆盖: {output}")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_EXAMPLE_CONFIG, encoding="utf-8")
    typer.echo(f"已写入: {output}")


__all__ = ["app"]
