"""Extraction prompt shared by the AI backends."""

EXTRACTION_PROMPT = """\
This photo is a bubble tea / milk tea shop receipt. The store name is near the top.

List only the DRINKS that were bought. Add-ons such as pearls, boba, pudding,
jelly, mochi, red bean, aloe or coconut are not drinks of their own: skip
them or treat them as part of the drink they belong to.

Reply with one JSON object and nothing else:
{"brandName": "store", "items": [{"drinkName": "name", "price": 5.50, "size": "medium", "sugarLevel": "less", "iceLevel": "less", "bubbleLevel": "none"}], "totalPrice": 5.50}

Allowed values:
- size: S/小杯 -> small, M/中杯 -> medium, L/大杯 -> large (default medium)
- sugarLevel: 0%/无糖 -> none, 25%/微糖 -> light, 50%/半糖 -> less, 70%/正常糖 -> regular, 100%/全糖 -> extra (default less)
- iceLevel: 去冰/hot -> none, 少冰 -> less, 正常冰 -> regular, 多冰 -> extra (default less)
- bubbleLevel: 无珍珠 -> none, 珍珠/波霸 -> regular, 多珍珠 -> extra (default none)

Use numbers for prices and omit any field you cannot read.
"""
