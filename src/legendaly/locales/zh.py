"""Chinese locale."""

from .base import Language, Locale, PatternSet

LOCALE = Locale(
    code=Language.ZH,
    system="""你是专门创作虚构名言及其背景的AI。请按照指定的tone创作名言，并严格使用以下格式：

名言 : 简短的一句话（不加引号）
角色名 : 说出这句名言的虚构人物
作品名 : 该人物登场的虚构作品
年代 : 作品的时代设定
---

禁止使用真实人物或作品。每条名言之间必须用"---"分隔。""",
    batch_template='请以tone: {tone}{category}的氛围，按照上述格式生成{count}条名言及人物信息。\n每条名言之间务必用"---"分隔。\n请使用中文输出。',
    category_template="、主题为{category}",
    patterns=PatternSet.from_labels("名言", "角色名", "作品名", "年代"),
    placeholders={
        "network": "请检查网络连接",
        "auth": "请检查 OpenAI API 密钥",
        "rate_limit": "已达到 API 速率限制，请稍候",
        "unknown": "发生了意外错误",
    },
)
