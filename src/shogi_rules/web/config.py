"""Web server configuration.

HTTP サーバの設定。環境変数から読み込む。
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class WebConfig:
    """Configuration for the rules HTTP server.

    Attributes:
        host:      待ち受けるホスト
        port:      待ち受けるポート
        log_level: ログレベル名（"DEBUG" にすると反則で除外された手が記録される）
    """

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> WebConfig:
        """SHOGI_RULES_HOST / SHOGI_RULES_PORT / SHOGI_RULES_LOG_LEVEL から作る。"""
        defaults = cls()
        port = defaults.port
        raw_port = os.environ.get("SHOGI_RULES_PORT")
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError as e:
                msg = f"SHOGI_RULES_PORT must be an integer, got {raw_port!r}"
                raise ValueError(msg) from e
        return cls(
            host=os.environ.get("SHOGI_RULES_HOST", defaults.host),
            port=port,
            log_level=os.environ.get("SHOGI_RULES_LOG_LEVEL", defaults.log_level).upper(),
        )
