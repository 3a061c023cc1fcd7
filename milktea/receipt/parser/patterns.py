"""Bilingual phrase tables used by the rule-based receipt parser.

Each attribute table is an ordered sequence of ``(canonical value, phrases)``
pairs. Matching walks the table top to bottom and the first phrase found
wins, so more specific phrasing must sit above the looser phrasing it
overlaps with (e.g. "extra boba" above "boba").

Phrases containing CJK characters are matched against the original text;
Latin phrases are matched against a lower-cased copy and must stand as
their own token.
"""

from __future__ import annotations

from ..models import Ice, Size, Sugar, Topping

SIZE_PATTERNS: tuple[tuple[Size, tuple[str, ...]], ...] = (
    (Size.SMALL, (
        "small", "sm", "s size", "(s)",
        "小杯", "小",
    )),
    (Size.MEDIUM, (
        "medium", "med", "m size", "(m)", "regular", "standard", "m",
        "中杯", "中",
    )),
    (Size.LARGE, (
        "large", "lg", "l size", "(l)", "big", "l",
        "大杯", "大",
    )),
)

SUGAR_PATTERNS: tuple[tuple[Sugar, tuple[str, ...]], ...] = (
    (Sugar.NONE, (
        "no sugar", "sugar free", "zero sugar", "0% sugar", "unsweetened",
        "sugar 0%", "0 sugar", "sugar: 0%", "sugar:0%", "sugar - 0%",
        "sugar-0%", "0%sugar",
        "0%",
        "无糖", "不加糖", "0糖", "零糖",
        "無糖",
    )),
    (Sugar.LIGHT, (
        "light sugar", "30% sugar", "sugar 30%", "less sweet",
        "slightly sweet", "1/3 sugar", "sugar: 30%", "sugar:30%",
        "sugar - 30%", "sugar-30%", "30%sugar", "30 % sugar",
        "25% sugar", "sugar 25%", "sugar: 25%",
        "30%", "25%", "30 %", "25 %",
        "微糖", "三分糖", "少少糖", "3分糖",
    )),
    (Sugar.LESS, (
        "half sugar", "50% sugar", "sugar 50%", "half sweet", "1/2 sugar",
        "med sugar", "medium sugar", "sugar: 50%", "sugar:50%",
        "sugar - 50%", "sugar-50%", "50%sugar", "50 % sugar", "50 percent",
        "sugar 50 %", "50% sweet", "sweet 50%",
        "45% sugar", "sugar 45%", "55% sugar", "sugar 55%",
        "50%", "50 %", "45%", "55%",
        "半糖", "五分糖", "5分糖",
    )),
    (Sugar.REGULAR, (
        "regular sugar", "70% sugar", "sugar 70%", "normal sugar",
        "standard sugar", "less sugar", "sugar: 70%", "sugar:70%",
        "sugar - 70%", "sugar-70%", "70%sugar", "70 % sugar",
        "75% sugar", "sugar 75%", "65% sugar", "sugar 65%",
        "70%", "75%", "65%", "70 %", "75 %",
        "正常糖", "七分糖", "少糖", "7分糖",
    )),
    (Sugar.EXTRA, (
        "extra sugar", "100% sugar", "sugar 100%", "full sugar",
        "sugar: 100%", "sugar:100%", "sugar - 100%", "sugar-100%",
        "100%sugar", "100 % sugar",
        "90% sugar", "sugar 90%", "95% sugar", "sugar 95%",
        "100%", "90%", "95%", "100 %",
        "全糖", "十分糖", "多糖", "10分糖", "满糖",
        "滿糖",
    )),
)

ICE_PATTERNS: tuple[tuple[Ice, tuple[str, ...]], ...] = (
    (Ice.NONE, (
        "no ice", "hot", "without ice", "room temp", "room temperature",
        "warm", "ice free", "noice", "no-ice", "ice: no", "ice:no",
        "0% ice", "zero ice",
        "去冰", "热饮", "常温", "温", "热", "无冰", "不加冰",
        "熱飲", "常溫", "溫", "熱", "無冰",
    )),
    (Ice.LESS, (
        "less ice", "light ice", "easy ice", "little ice", "half ice",
        "lessice", "less  ice", "lite ice", "liteice", "low ice",
        "less-ice", "ice: less", "ice:less", "50% ice",
        "少冰", "微冰",
    )),
    (Ice.REGULAR, (
        "regular ice", "normal ice", "standard ice", "regularice",
        "reg ice", "ice: regular", "ice:regular", "100% ice",
        "正常冰", "标准冰",
        "標準冰",
    )),
    (Ice.EXTRA, (
        "extra ice", "more ice", "lots of ice",
        "多冰", "加冰",
    )),
)

# "extra" sits above "regular": every extra phrase contains a regular one.
TOPPING_PATTERNS: tuple[tuple[Topping, tuple[str, ...]], ...] = (
    (Topping.NONE, (
        "no boba", "no pearl", "no tapioca", "no topping", "without boba",
        "without pearl",
        "不加珍珠", "去珍珠", "无珍珠", "不要珍珠", "不加波霸", "去波霸",
        "無珍珠",
    )),
    (Topping.EXTRA, (
        "extra boba", "extra pearl", "double boba", "double pearl",
        "more boba", "more pearl",
        "多珍珠", "双倍珍珠", "加倍珍珠", "多波霸", "双倍波霸",
        "雙倍珍珠",
    )),
    (Topping.REGULAR, (
        "boba", "pearl", "pearls", "tapioca", "bubble", "with boba",
        "with pearl", "add boba", "add pearl",
        "珍珠", "波霸", "加珍珠", "加波霸",
    )),
)

# Sugar percentage used when no sugar phrase matched. A percentage followed
# by "ice" or "冰" belongs to the ice tables.
ICE_SUFFIX_GUARD = r"(?!\s*(?:ice|冰))"
PERCENTAGE_PATTERN = r"(\d{1,3})\s*%" + ICE_SUFFIX_GUARD

# (upper bound inclusive, level); checked in order
SUGAR_PERCENT_BUCKETS: tuple[tuple[int, Sugar], ...] = (
    (10, Sugar.NONE),
    (40, Sugar.LIGHT),
    (60, Sugar.LESS),
    (85, Sugar.REGULAR),
    (100, Sugar.EXTRA),
)

DRINK_KEYWORDS_EN: tuple[str, ...] = (
    "milk tea", "boba", "pearl", "bubble tea", "taro", "matcha",
    "brown sugar", "oolong", "jasmine", "green tea", "black tea", "latte",
    "smoothie", "slush", "fruit tea", "cheese", "cream", "tiger", "tea",
    "coffee", "fresh", "juice", "peach", "grape", "strawberry", "mango",
    "passion fruit", "lychee", "honeydew", "wintermelon", "thai", "yakult",
    "yogurt", "pudding", "jelly", "almond", "coconut", "caramel", "vanilla",
    "chocolate", "cocoa", "mocha",
)

DRINK_KEYWORDS_ZH: tuple[str, ...] = (
    "奶茶", "珍珠", "波霸", "芋头", "芋頭", "抹茶", "黑糖", "乌龙", "烏龍",
    "茉莉", "绿茶", "綠茶", "红茶", "紅茶", "拿铁", "拿鐵", "冰沙", "水果茶",
    "芝士", "奶盖", "奶蓋", "虎纹", "虎紋", "鲜奶", "鮮奶", "椰", "芒果",
    "草莓", "蜜瓜", "冬瓜", "百香", "荔枝", "葡萄", "桃", "柠檬", "檸檬",
    "养乐多", "養樂多", "布丁", "果冻", "果凍", "杏仁", "可可", "焦糖", "香草",
)

TOTAL_KEYWORDS_EN: tuple[str, ...] = (
    "total", "subtotal", "amount due", "grand total", "balance",
)

TOTAL_KEYWORDS_ZH: tuple[str, ...] = (
    "合计", "总计", "小计", "金额", "总价", "應付", "应付", "總計",
)

# Receipt noise removed from drink names (case-insensitive).
NAME_ARTIFACTS: tuple[str, ...] = (
    "x1", "x2", "x3", "×1", "×2", "×3", "qty:", "qty", "#", "1x", "2x", "3x",
)

LOOKAHEAD_LINES = 5
