from __future__ import annotations

from .categories import category_for_code
from .models import Menu

# Three signature dishes per category group code, as (name, description).
MENU_CATALOG: dict[str, tuple[tuple[str, str], ...]] = {
    "FD6": (
        ("김치찌개", "매콤한 김치찌개"),
        ("된장찌개", "구수한 된장찌개"),
        ("비빔밥", "건강한 비빔밥"),
    ),
    "FD7": (
        ("짜장면", "고소한 짜장면"),
        ("짬뽕", "얼큰한 짬뽕"),
        ("탕수육", "바삭한 탕수육"),
    ),
    "FD8": (
        ("초밥", "신선한 초밥"),
        ("라멘", "진한 국물 라멘"),
        ("돈카츠", "바삭한 돈카츠"),
    ),
    "FD9": (
        ("파스타", "크리미한 파스타"),
        ("피자", "치즈 가득 피자"),
        ("스테이크", "부드러운 스테이크"),
    ),
    "FD4": (
        ("햄버거", "맛있는 햄버거"),
        ("치킨", "바삭한 치킨"),
        ("피자", "치즈 가득 피자"),
    ),
    "CE7": (
        ("아메리카노", "깔끔한 아메리카노"),
        ("카페라떼", "부드러운 카페라떼"),
        ("카푸치노", "크리미한 카푸치노"),
    ),
}


def menus_for_code(code: str | None) -> tuple[Menu, ...]:
    """Build fresh menu items for a category group code; unknown codes get none."""
    items = MENU_CATALOG.get(code or "")
    if items is None:
        return ()
    category = category_for_code(code)
    return tuple(
        Menu(name=name, category=category, description=description)
        for name, description in items
    )
