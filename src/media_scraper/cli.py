"""命令行入口"""
import sys
import logging
import argparse
from typing import List, Optional

from .config import Config
from .media_metadata import MediaMetadata
from . import metadata_util

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="media-scraper", description="媒体元数据刮削辅助工具")
    parser.add_argument("--config", help="配置文件路径")
    parser.add_argument("--debug", action="store_true", help="启用调试模式")
    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="计算标题相似度")
    score.add_argument("search", help="搜索标题")
    score.add_argument("match", help="候选标题")
    score.add_argument("--compressed", action="store_true", default=None,
                       help="同时比较去除非字母字符后的标题")

    date = subparsers.add_parser("date", help="将日期规范化为 yyyy-MM-dd")
    date.add_argument("text", help="日期文本")
    date.add_argument("pattern", nargs="?", help="日期模式，默认取自配置")

    runtime = subparsers.add_parser("runtime", help="从文本中解析时长（毫秒）")
    runtime.add_argument("text", help="包含时长的文本")
    runtime.add_argument("--regex", help="包含一个捕获组的正则表达式，默认取自配置")

    split_id = subparsers.add_parser("split-id", help="拆分 前缀:编号 形式的 ID")
    split_id.add_argument("id")

    return parser


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def run(args: argparse.Namespace, config: Config) -> int:
    """执行子命令，返回退出码"""
    if args.command == "score":
        compressed = config.compressed_scoring if args.compressed is None else args.compressed
        if compressed:
            score = metadata_util.calculate_compressed_score(args.search, args.match)
        else:
            score = metadata_util.calculate_score(args.search, args.match)
        print(f"{score:.4f}")
        return 0

    if args.command == "date":
        outcome = metadata_util.set_release_date_from_formatted_date(
            MediaMetadata(), args.text, args.pattern or config.date_format)
        if not outcome:
            return _fail(outcome.message)
        print(outcome.value)
        return 0

    if args.command == "runtime":
        outcome = metadata_util.parse_running_time(args.text, args.regex or config.running_time_regex)
        if not outcome:
            return _fail(outcome.message)
        print(outcome.value)
        return 0

    if args.command == "split-id":
        print("\n".join(metadata_util.get_metadata_id_parts(args.id)))
        return 0

    return _fail(f"未知命令: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config(args.config)

    # 设置日志级别
    level = logging.DEBUG if args.debug else getattr(logging, config.log_level, logging.INFO)
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)
    logger.debug("Debug mode enabled" if args.debug else f"Log level: {config.log_level}")

    return run(args, config)


if __name__ == "__main__":
    sys.exit(main())
