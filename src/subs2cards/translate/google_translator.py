from __future__ import annotations

import os

import requests

from .translator import TranslationEngine, TranslationError, proxies_from_env


class GoogleTranslator(TranslationEngine):
    """
    使用 Google 翻译兼容接口的简单翻译引擎，无需凭据。

    默认使用官方接口：
      - https://translate.googleapis.com
    也可通过环境变量自定义：
      - SUBS2CARDS_GOOGLE_TRANSLATE_URL
        - 例如指向自建代理或反向代理服务

    代理配置（可选，通过 .env 或环境变量注入）：
      - SUBS2CARDS_HTTP_PROXY
      - SUBS2CARDS_HTTPS_PROXY
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        env_url = os.getenv("SUBS2CARDS_GOOGLE_TRANSLATE_URL")
        if base_url is not None:
            self.base_url = base_url.rstrip("/")
        elif env_url:
            self.base_url = env_url.rstrip("/")
        else:
            self.base_url = "https://translate.googleapis.com"
        self.timeout = timeout
        self.proxies = proxies_from_env()

    def _endpoint(self) -> str:
        # 采用与 translate.googleapis.com 兼容的路径
        return f"{self.base_url}/translate_a/single"

    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        if not text.strip():
            return ""
        params = {
            "client": "gtx",
            "sl": source_lang or "auto",
            "tl": target_lang,
            "dt": "t",
            "q": text,
        }
        headers = {
            "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) subs2cards/0.1.0",
        }
        try:
            resp = requests.get(
                self._endpoint(),
                params=params,
                timeout=self.timeout,
                headers=headers,
                proxies=self.proxies,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise TranslationError(f"Google 翻译请求失败: {exc}") from exc

        translated_parts: list[str] = []
        if isinstance(data, list) and data and isinstance(data[0], list):
            for part in data[0]:
                if isinstance(part, list) and part and part[0]:
                    translated_parts.append(str(part[0]))
        if not translated_parts:
            raise TranslationError("Google 翻译返回内容为空")
        return "".join(translated_parts).strip()
