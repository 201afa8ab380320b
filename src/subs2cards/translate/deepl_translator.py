from __future__ import annotations

import os

import requests

from .translator import TranslationEngine, TranslationError, proxies_from_env

DEEPL_FREE_URL = "https://api-free.deepl.com"
DEEPL_PRO_URL = "https://api.deepl.com"


def normalize_formality(value: str | None) -> str:
    """
    将 CLI 传入的 formality 收敛为 default / more / less 三种取值，未知值按 default 处理。
    """
    key = (value or "default").strip().lower()
    if key in {"default", "more", "less"}:
        return key
    if key == "prefer_more":
        return "more"
    if key == "prefer_less":
        return "less"
    return "default"


def _deepl_lang(code: str, is_target: bool) -> str:
    upper = (code or "").strip().upper().replace("_", "-")
    # DeepL 的英文目标语言必须指定变体
    if is_target and upper == "EN":
        return "EN-US"
    if not is_target and "-" in upper:
        return upper.split("-", 1)[0]
    return upper


class DeepLTranslator(TranslationEngine):
    """
    基于 DeepL REST API v2 的翻译引擎。

    环境变量约定（来自 .env 或系统环境）：
      - DEEPL_API_KEY          # 必填，以 ":fx" 结尾的免费版密钥自动使用 api-free 域名
      - SUBS2CARDS_DEEPL_URL   # 可选，覆盖接口根地址
      - SUBS2CARDS_HTTP_PROXY / SUBS2CARDS_HTTPS_PROXY
    """

    def __init__(
        self,
        auth_key: str | None = None,
        formality: str | None = "default",
        glossary_id: str | None = None,
        base_url: str | None = None,
        timeout: float = 15.0,
    ) -> None:
        key = auth_key or os.getenv("DEEPL_API_KEY")
        if not key:
            raise RuntimeError(
                "DEEPL_API_KEY environment variable is required for --auto-translate with the deepl engine."
            )
        self.auth_key = key

        env_url = os.getenv("SUBS2CARDS_DEEPL_URL")
        if base_url is not None:
            self.base_url = base_url.rstrip("/")
        elif env_url:
            self.base_url = env_url.rstrip("/")
        elif key.endswith(":fx"):
            self.base_url = DEEPL_FREE_URL
        else:
            self.base_url = DEEPL_PRO_URL

        self.formality = normalize_formality(formality)
        self.glossary_id = glossary_id or None
        self.timeout = timeout
        self.proxies = proxies_from_env()

    def _endpoint(self) -> str:
        return f"{self.base_url}/v2/translate"

    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        if not text.strip():
            return ""
        payload: dict[str, object] = {
            "text": [text],
            "source_lang": _deepl_lang(source_lang, is_target=False),
            "target_lang": _deepl_lang(target_lang, is_target=True),
        }
        if self.formality != "default":
            payload["formality"] = self.formality
        if self.glossary_id:
            payload["glossary_id"] = self.glossary_id

        headers = {
            "Authorization": f"DeepL-Auth-Key {self.auth_key}",
            "Content-Type": "application/json",
        }
        try:
            resp = requests.post(
                self._endpoint(),
                json=payload,
                headers=headers,
                timeout=self.timeout,
                proxies=self.proxies,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise TranslationError(f"DeepL 请求失败: {exc}") from exc

        translations = data.get("translations") if isinstance(data, dict) else None
        if not isinstance(translations, list) or not translations or not isinstance(translations[0], dict):
            raise TranslationError(f"DeepL 响应缺少 translations 字段: {data!r}")
        translated = str(translations[0].get("text") or "").strip()
        if not translated:
            raise TranslationError("DeepL 返回的译文为空")
        return translated
