from __future__ import annotations

import os
from abc import ABC, abstractmethod


class TranslationError(RuntimeError):
    """
    外部翻译服务调用失败（网络错误、HTTP 错误或响应格式异常）。
    """


class TranslationEngine(ABC):
    """
    翻译引擎抽象接口。

    所有具体翻译实现（DeepL / Google）都应遵循该接口，
    以便在 Pipeline 中进行统一调度。失败时抛出 TranslationError。
    """

    @abstractmethod
    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        将单句文本翻译为目标语言，返回译文。
        """


def proxies_from_env() -> dict[str, str] | None:
    http_proxy = os.getenv("SUBS2CARDS_HTTP_PROXY")
    https_proxy = os.getenv("SUBS2CARDS_HTTPS_PROXY")
    proxies: dict[str, str] = {}
    if http_proxy:
        proxies["http"] = http_proxy
    if https_proxy:
        proxies["https"] = https_proxy
    return proxies or None
