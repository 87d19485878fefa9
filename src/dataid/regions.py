"""Provincial-level administrative division codes.

The first two digits of an ID card number identify the province,
autonomous region, municipality or special administrative region of issue.
"""

from __future__ import annotations

PROVINCE_CODES: dict[str, str] = {
    "11": "北京",
    "12": "天津",
    "13": "河北",
    "14": "山西",
    "15": "内蒙古",
    "21": "辽宁",
    "22": "吉林",
    "23": "黑龙江",
    "31": "上海",
    "32": "江苏",
    "33": "浙江",
    "34": "安徽",
    "35": "福建",
    "36": "江西",
    "37": "山东",
    "41": "河南",
    "42": "湖北",
    "43": "湖南",
    "44": "广东",
    "45": "广西",
    "46": "海南",
    "50": "重庆",
    "51": "四川",
    "52": "贵州",
    "53": "云南",
    "54": "西藏",
    "61": "陕西",
    "62": "甘肃",
    "63": "青海",
    "64": "宁夏",
    "65": "新疆",
    "71": "台湾",
    "81": "香港",
    "82": "澳门",
    "83": "台湾",  # residents of Taiwan holding mainland residence permits
    "91": "国外",
}


def province_name(code: str) -> str | None:
    """Return the province name for a 2-digit code, or None if unknown."""
    return PROVINCE_CODES.get(code[:2])


def is_known_province(code: str) -> bool:
    return code[:2] in PROVINCE_CODES
