from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import re
from typing import Optional

from .translate.factory import TRANSLATION_ENGINES

DEFAULT_SOURCE_LANG = "ja"
DEFAULT_TARGET_LANG = "en"

_LANG_SUFFIX_RE = re.compile(r"\.(ja|jp)$", re.IGNORECASE)


def bundled_dictionary_path() -> Path:
    return Path(__file__).resolve().parent / "data" / "japanese-mini-dict.json"


def _resolve(path: str | Path) -> Path:
    return Path(path).expanduser().resolve()


def default_cards_path(input_path: Path, suffix: str) -> Path:
    """
    根据 SRT 路径推导卡片输出路径：

      - 去掉文件名末尾的 .ja / .jp 语言后缀；
      - 若输入位于 raw/ 目录下，则输出到同级的 cards/ 目录。
    """
    base_name = _LANG_SUFFIX_RE.sub("", input_path.stem)
    target_dir = input_path.parent
    if target_dir.name.lower() == "raw":
        target_dir = target_dir.parent / "cards"
    return target_dir / f"{base_name}{suffix}"


@dataclass
class ParseConfig:
    """
    SRT -> 卡片 JSON / TSV 的配置。
    """

    input_path: Path
    json_path: Optional[Path] = None
    tsv_path: Optional[Path] = None
    write_json: bool = True
    write_tsv: bool = True

    def __post_init__(self) -> None:
        if not self.write_json and not self.write_tsv:
            raise ValueError("At least one output (JSON or TSV) must be enabled.")

    @classmethod
    def from_paths(
        cls,
        input_path: str | Path,
        json_path: Optional[str | Path] = None,
        tsv_path: Optional[str | Path] = None,
        write_json: bool = True,
        write_tsv: bool = True,
    ) -> "ParseConfig":
        input_path_obj = _resolve(input_path)
        json_path_obj: Optional[Path] = None
        tsv_path_obj: Optional[Path] = None
        if write_json:
            json_path_obj = (
                _resolve(json_path)
                if json_path is not None
                else default_cards_path(input_path_obj, ".cards.json")
            )
        if write_tsv:
            tsv_path_obj = (
                _resolve(tsv_path)
                if tsv_path is not None
                else default_cards_path(input_path_obj, ".cards.tsv")
            )
        return cls(
            input_path=input_path_obj,
            json_path=json_path_obj,
            tsv_path=tsv_path_obj,
            write_json=write_json,
            write_tsv=write_tsv,
        )


@dataclass
class EnrichConfig:
    """
    卡片富化（分词、释义、译文）的配置。

    未显式传入的字段按以下规则推导：
      - output_json_path 默认覆盖输入文件；
      - tsv_path 默认与输出 JSON 同名、后缀为 .tsv；
      - translation_save_path 默认写回 translation_path；
      - dict_path 依次取 SUBS2CARDS_DICT_PATH、内置小词典。
    """

    input_path: Path
    dict_path: Path
    output_json_path: Path
    tsv_path: Path
    translation_path: Optional[Path] = None
    translation_save_path: Optional[Path] = None
    write_tsv: bool = True
    auto_translate: bool = False
    # 自动翻译是否覆盖非提示来源（卡片自带译文 / 直译）的结果
    auto_translate_replace: bool = True
    translation_engine: str = "deepl"
    deepl_formality: str = "default"
    deepl_glossary_id: Optional[str] = None
    source_lang: str = DEFAULT_SOURCE_LANG
    target_lang: str = DEFAULT_TARGET_LANG

    def __post_init__(self) -> None:
        if self.translation_engine not in TRANSLATION_ENGINES:
            raise ValueError(f"Unknown translation engine: {self.translation_engine}")

    @classmethod
    def from_paths(
        cls,
        input_path: str | Path,
        dict_path: Optional[str | Path] = None,
        translation_path: Optional[str | Path] = None,
        translation_save_path: Optional[str | Path] = None,
        output_json_path: Optional[str | Path] = None,
        tsv_path: Optional[str | Path] = None,
        write_tsv: bool = True,
        auto_translate: bool = False,
        auto_translate_replace: bool = True,
        translation_engine: Optional[str] = None,
        deepl_formality: str = "default",
        deepl_glossary_id: Optional[str] = None,
    ) -> "EnrichConfig":
        input_path_obj = _resolve(input_path)

        if dict_path is not None:
            dict_path_obj = _resolve(dict_path)
        else:
            env_dict = os.getenv("SUBS2CARDS_DICT_PATH", "").strip()
            dict_path_obj = _resolve(env_dict) if env_dict else bundled_dictionary_path()

        output_json_obj = _resolve(output_json_path) if output_json_path else input_path_obj
        tsv_path_obj = _resolve(tsv_path) if tsv_path else output_json_obj.with_suffix(".tsv")

        translation_path_obj = _resolve(translation_path) if translation_path else None
        if translation_save_path:
            translation_save_obj: Optional[Path] = _resolve(translation_save_path)
        else:
            translation_save_obj = translation_path_obj

        # 翻译引擎：优先显式传入，其次读取环境变量 SUBS2CARDS_TRANSLATION_ENGINE
        if translation_engine is None:
            engine_value = os.getenv("SUBS2CARDS_TRANSLATION_ENGINE", "").strip().lower() or "deepl"
        else:
            engine_value = translation_engine.lower()

        return cls(
            input_path=input_path_obj,
            dict_path=dict_path_obj,
            output_json_path=output_json_obj,
            tsv_path=tsv_path_obj,
            translation_path=translation_path_obj,
            translation_save_path=translation_save_obj,
            write_tsv=write_tsv,
            auto_translate=auto_translate,
            auto_translate_replace=auto_translate_replace,
            translation_engine=engine_value,
            deepl_formality=deepl_formality,
            deepl_glossary_id=deepl_glossary_id,
        )
