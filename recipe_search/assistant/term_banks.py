"""Fixed term banks for classification, autocomplete, hints and the loading animation."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

# Cooking-method and dish-category markers; any substring hit suggests a dish name
DISH_KEYWORDS: Tuple[str, ...] = (
    "红烧", "宫保", "糖醋", "清蒸", "炒", "煮", "汤", "面", "饭",
)

INGREDIENT_BANK: Tuple[str, ...] = (
    "鸡蛋", "西红柿", "青菜", "土豆", "萝卜", "猪肉", "牛肉", "鸡肉",
    "鱼肉", "洋葱", "大蒜", "生姜", "葱", "香菜", "豆腐", "豆芽",
    "黄瓜", "冬瓜", "茄子", "青椒", "红椒", "西兰花", "菜花", "白菜",
)

DISH_BANK: Tuple[str, ...] = (
    "红烧肉", "宫保鸡丁", "糖醋排骨", "麻婆豆腐", "水煮鱼", "清蒸鲈鱼",
    "西红柿鸡蛋汤", "冬瓜排骨汤", "炸酱面", "牛肉面", "刀削面",
    "回锅肉", "鱼香肉丝", "京酱肉丝", "锅包肉", "地三鲜",
)

# (icon, label, terms) per hint tab
Hint = Tuple[str, Optional[str], str]

HINTS: Dict[str, List[Hint]] = {
    "ingredients": [
        ("🥚", None, "鸡蛋、鸭蛋"), ("🥬", None, "西红柿、青菜"),
        ("🥩", None, "猪肉、鸡肉"), ("🥕", None, "土豆、萝卜"),
        ("🫛", None, "豆类"), ("🍄", None, "蘑菇"),
        ("🧀", None, "奶酪"), ("🥦", None, "西兰花"),
    ],
    "dishes": [
        ("🥘", "家常菜", "红烧肉、糖醋排骨"), ("🍛", "地方菜", "宫保鸡丁、水煮鱼"),
        ("🥣", "汤类", "西红柿鸡蛋汤"), ("🍜", "面食", "炸酱面、牛肉面"),
    ],
    "seasonal": [
        ("🌸", "春季", "春笋、韭菜、香椿"), ("☀️", "夏季", "黄瓜、冬瓜、丝瓜"),
        ("🍂", "秋季", "南瓜、排骨、螃蟹"), ("❄️", "冬季", "萝卜、白菜、羊肉"),
    ],
}

ANALYSIS_STEPS: Tuple[str, ...] = ("识别输入", "匹配食谱", "营养分析", "生成建议")

LOADING_MESSAGES: Tuple[str, ...] = (
    "👨‍🍳 AI厨师正在分析食材...",
    "🔥 激活智能烹饪算法...",
    "🥘 匹配最佳食谱方案...",
    "🥄 计算营养和烹饪要点...",
    "✨ 生成个性化建议...",
)

LOADERS: Tuple[str, ...] = ("chef", "spoon")


def get_hint_items(category: str) -> List[Dict[str, Optional[str]]]:
    """Hints of one tab as template-friendly dicts. Unknown tabs yield an empty list."""
    return [
        {"icon": icon, "label": label, "terms": terms}
        for icon, label, terms in HINTS.get(category, [])
    ]
