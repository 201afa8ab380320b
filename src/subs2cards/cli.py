from __future__ import annotations

import argparse
import sys

from .env import load_dotenv_if_present
from .config import EnrichConfig, ParseConfig
from .pipeline import EnrichPipeline, ParsePipeline
from .scaffold import scaffold_episode
from .translate.factory import TRANSLATION_ENGINES


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subs2cards",
        description="subs2cards: 将日语 SRT 字幕转换为带词汇拆解与译文的 Anki 闪卡。",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser(
        "parse",
        help="解析 SRT 字幕，输出卡片 JSON 与 TSV。",
    )
    parse_cmd.add_argument("input", type=str, help="输入 SRT 文件路径。")
    parse_cmd.add_argument(
        "--json",
        type=str,
        default=None,
        help="卡片 JSON 输出路径（默认: <输入>.cards.json，raw/ 下的输入写到同级 cards/）。",
    )
    parse_cmd.add_argument(
        "--tsv",
        type=str,
        default=None,
        help="TSV 输出路径（默认: <输入>.cards.tsv）。",
    )
    parse_cmd.add_argument("--no-json", action="store_true", help="不输出 JSON 文件。")
    parse_cmd.add_argument("--no-tsv", action="store_true", help="不输出 TSV 文件。")

    enrich_cmd = subparsers.add_parser(
        "enrich",
        help="为卡片 JSON 补充分词、释义与译文。",
    )
    enrich_cmd.add_argument("input", type=str, help="输入卡片 JSON 路径。")
    enrich_cmd.add_argument(
        "--dict",
        type=str,
        default=None,
        help="词典 JSON 路径（默认: SUBS2CARDS_DICT_PATH 或内置小词典）。",
    )
    enrich_cmd.add_argument(
        "--translations",
        type=str,
        default=None,
        help="译文提示 JSON（按 id / subtitleId / sentence 匹配）。",
    )
    enrich_cmd.add_argument(
        "--translations-out",
        type=str,
        default=None,
        help="更新后的译文缓存写入路径（默认与 --translations 相同）。",
    )
    enrich_cmd.add_argument(
        "--out",
        type=str,
        default=None,
        help="富化后 JSON 的输出路径（默认覆盖输入文件）。",
    )
    enrich_cmd.add_argument(
        "--tsv",
        type=str,
        default=None,
        help="TSV 输出路径（默认与输出 JSON 同名）。",
    )
    enrich_cmd.add_argument("--no-tsv", action="store_true", help="不输出 TSV 文件。")
    enrich_cmd.add_argument(
        "--auto-translate",
        "--deepl-translate",
        dest="auto_translate",
        action="store_true",
        help="调用外部翻译服务补全译文（--deepl-translate 为别名）。",
    )
    enrich_cmd.add_argument(
        "--auto-translate-keep",
        action="store_true",
        help="保留卡片已有译文与直译结果，仅在没有任何译文时调用外部翻译。",
    )
    enrich_cmd.add_argument(
        "--translation-engine",
        type=str,
        choices=list(TRANSLATION_ENGINES),
        default=None,
        help="翻译引擎：deepl / google（默认 deepl，可通过 SUBS2CARDS_TRANSLATION_ENGINE 配置）。",
    )
    enrich_cmd.add_argument(
        "--deepl-formality",
        type=str,
        default="default",
        help="DeepL formality：default / more / less / prefer_more / prefer_less。",
    )
    enrich_cmd.add_argument(
        "--deepl-glossary",
        type=str,
        default=None,
        help="DeepL 术语表 ID。",
    )

    scaffold_cmd = subparsers.add_parser(
        "scaffold",
        help="创建 subtitles/<Show>/episodeNN/{raw,cards} 目录结构。",
    )
    scaffold_cmd.add_argument("show", type=str, help="剧集目录名（如 ChainsawMan）。")
    scaffold_cmd.add_argument("episode", type=str, help="集数（如 01）。")
    scaffold_cmd.add_argument("ja_source", nargs="?", default=None, help="可选：日语 SRT 源文件。")
    scaffold_cmd.add_argument("en_source", nargs="?", default=None, help="可选：英语 SRT 源文件。")
    scaffold_cmd.add_argument(
        "--root",
        type=str,
        default="subtitles",
        help="字幕根目录（默认: ./subtitles）。",
    )
    return parser


def _run_parse(args: argparse.Namespace) -> None:
    config = ParseConfig.from_paths(
        input_path=args.input,
        json_path=args.json,
        tsv_path=args.tsv,
        write_json=not args.no_json,
        write_tsv=not args.no_tsv,
    )
    ParsePipeline(config).run()


def _run_enrich(args: argparse.Namespace) -> None:
    config = EnrichConfig.from_paths(
        input_path=args.input,
        dict_path=args.dict,
        translation_path=args.translations,
        translation_save_path=args.translations_out,
        output_json_path=args.out,
        tsv_path=args.tsv,
        write_tsv=not args.no_tsv,
        auto_translate=args.auto_translate,
        auto_translate_replace=not args.auto_translate_keep,
        translation_engine=args.translation_engine,
        deepl_formality=args.deepl_formality,
        deepl_glossary_id=args.deepl_glossary,
    )
    cards = EnrichPipeline(config).run()
    print(f"   卡片数: {len(cards)}")


def _run_scaffold(args: argparse.Namespace) -> None:
    layout = scaffold_episode(
        args.show,
        args.episode,
        ja_source=args.ja_source,
        en_source=args.en_source,
        root=args.root,
    )
    print(f"剧集目录已就绪: {layout.episode_dir}")
    print(f"   原始字幕: {layout.raw_dir}")
    print(f"   卡片输出: {layout.cards_dir}")
    for copied in layout.copied:
        print(f"   已复制: {copied}")


def main(argv: list[str] | None = None) -> int:
    # 确保在解析参数和使用配置之前加载 .env 中的环境变量
    load_dotenv_if_present()
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    handlers = {
        "parse": _run_parse,
        "enrich": _run_enrich,
        "scaffold": _run_scaffold,
    }
    try:
        handlers[args.command](args)
        return 0
    except KeyboardInterrupt:
        print("\n用户中断")
        return 1
    except Exception as exc:
        print(f"处理失败: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
