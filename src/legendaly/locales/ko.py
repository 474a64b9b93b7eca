"""Korean locale."""

from .base import Language, Locale, PatternSet

LOCALE = Locale(
    code=Language.KO,
    system="""당신은 가상의 명언과 그 배경을 만드는 AI입니다. 지정된 tone에 맞는 명언을 아래 형식으로 엄격하게 출력하세요:

명언 : 짧은 한 문장 (따옴표 없이)
캐릭터 이름 : 명언을 말한 가상의 인물 이름
작품명 : 그 인물이 등장하는 가상의 작품 이름
연도 : 작품의 시대 설정
---

실존 인물이나 작품은 사용하지 마세요. 각 명언은 항상 "---"로 구분하세요.""",
    batch_template='tone: {tone}{category} 분위기에 맞는 명언과 캐릭터 정보를 위 형식으로 {count}개 생성하세요.\n각 명언은 반드시 "---"로 구분하세요.\n한국어로 출력하세요.',
    category_template=", 주제: {category}",
    patterns=PatternSet.from_labels("명언", "캐릭터 이름", "작품명", "연도"),
    placeholders={
        "network": "네트워크 연결을 확인하세요",
        "auth": "OpenAI API 키를 확인하세요",
        "rate_limit": "API 요청 한도에 도달했습니다. 잠시 기다려 주세요",
        "unknown": "예기치 않은 오류가 발생했습니다",
    },
)
