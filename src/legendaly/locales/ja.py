"""Japanese locale."""

from .base import Language, Locale, PatternSet

LOCALE = Locale(
    code=Language.JA,
    system="""架空の名言を作る専門AIです。指定されたtoneに合う名言を下記形式で出力：

名言 : 短い一文（カギカッコなし）
キャラクター名 : 架空の人物名
作品名 : 架空の作品名
西暦 : 時代設定
---

実在人物・作品は使用禁止。各名言は"---"で区切る。""",
    batch_template='tone: {tone}で{count}個の{category}名言を上記形式で生成。各名言を"---"で区切る。',
    category_template="{category}",
    default_category="日本語",
    patterns=PatternSet.from_labels("名言", "キャラクター名", "作品名", "西暦"),
    placeholders={
        "network": "ネットワーク接続を確認してください",
        "auth": "OpenAI APIキーを確認してください",
        "rate_limit": "APIレート制限に達しました。しばらくお待ちください",
        "unknown": "予期せぬエラーが発生しました",
    },
)
