"""activities/labels.py"""

# Backend ActivityType enum -> Vietnamese display label
ACTIVITY_TYPE_LABELS = {
    "SoilPreparation": "Chuẩn bị đất trước gieo",
    "Sowing": "Gieo hạt",
    "Thinning": "Tỉa cây con cho đều",
    "FertilizingDiluted": "Bón phân pha loãng (NPK 20–30%)",
    "Weeding": "Nhổ cỏ nhỏ",
    "PestControl": "Phòng trừ sâu bằng thuốc sinh học",
    "FertilizingLeaf": "Bón phân cho lá (N, hữu cơ)",
    "Harvesting": "Thu hoạch",
    "CleaningFarmArea": "Dọn dẹp đồng ruộng",
}

ACTIVITY_TYPE_CHOICES = list(ACTIVITY_TYPE_LABELS.items())


def get_activity_type_label(activity_type):
    if activity_type is None:
        return ""
    raw = str(activity_type)
    return ACTIVITY_TYPE_LABELS.get(raw, raw)
