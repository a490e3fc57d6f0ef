"""Thai (th) locale literal, with extended day periods in slot 21."""

from typing import Any

from localeengine.plural.rules import NoPluralRule

__all__ = ["EXTRA_DATA", "LOCALE_DATA"]

EXTRA_DATA: list[Any] = [
    [
        ["เที่ยงคืน", "เที่ยง", "เช้า", "เที่ยง", "บ่าย", "เย็น", "ค่ำ", "กลางคืน"],
        ["เที่ยงคืน", "เที่ยง", "ในตอนเช้า", "ในตอนบ่าย", "บ่าย", "ในตอนเย็น", "ค่ำ", "กลางคืน"],
        None,
    ],
    [
        ["เที่ยงคืน", "เที่ยง", "เช้า", "ช่วงเที่ยง", "บ่าย", "เย็น", "ค่ำ", "กลางคืน"],
        ["เที่ยงคืน", "เที่ยง", "ในตอนเช้า", "ในตอนบ่าย", "บ่าย", "ในตอนเย็น", "ค่ำ", "กลางคืน"],
        None,
    ],
    [
        "00:00", "12:00", ["06:00", "12:00"], ["12:00", "13:00"], ["13:00", "16:00"],
        ["16:00", "18:00"], ["18:00", "21:00"], ["21:00", "06:00"],
    ],
]

LOCALE_DATA: list[Any] = [
    "th",
    [["a", "p"], ["ก่อนเที่ยง", "หลังเที่ยง"], None],
    [["ก่อนเที่ยง", "หลังเที่ยง"], None, None],
    [
        ["อา", "จ", "อ", "พ", "พฤ", "ศ", "ส"],
        ["อา.", "จ.", "อ.", "พ.", "พฤ.", "ศ.", "ส."],
        ["วันอาทิตย์", "วันจันทร์", "วันอังคาร", "วันพุธ", "วันพฤหัสบดี", "วันศุกร์", "วันเสาร์"],
        ["อา.", "จ.", "อ.", "พ.", "พฤ.", "ศ.", "ส."],
    ],
    None,
    [
        [
            "ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.",
            "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค.",
        ],
        None,
        [
            "มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
            "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม",
        ],
    ],
    None,
    [["ก่อน ค.ศ.", "ค.ศ."], None, ["ปีก่อนคริสตกาล", "คริสต์ศักราช"]],
    0,
    [6, 0],
    ["d/M/yy", "d MMM y", "d MMMM G y", "EEEEที่ d MMMM G y"],
    [
        "HH:mm",
        "HH:mm:ss",
        "H นาฬิกา mm นาที ss วินาที z",
        "H นาฬิกา mm นาที ss วินาที zzzz",
    ],
    ["{1} {0}", None, None, None],
    [".", ",", ";", "%", "+", "-", "E", "×", "‰", "∞", "NaN", ":"],
    ["#,##0.###", "#,##0%", "¤#,##0.00", "#E0"],
    "THB",
    "฿",
    "บาท",
    {
        "AUD": ["AU$", "$"],
        "BYN": [None, "р."],
        "PHP": [None, "₱"],
        "THB": ["฿"],
        "TWD": ["NT$"],
        "USD": ["US$", "$"],
        "XXX": [],
    },
    "ltr",
    NoPluralRule(),
    EXTRA_DATA,
]
