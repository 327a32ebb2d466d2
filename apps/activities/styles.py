"""activities/styles.py

Status colours and labels for every place an activity is drawn: month cells,
week/day board cards and status badges. Colour is decided by an ordered list
of rules; the first rule that returns a colour wins.
"""

from collections import namedtuple

from .models import ActivityStatus

STATUS_COLORS = {
    ActivityStatus.ACTIVE: "#16A34A",
    ActivityStatus.IN_PROGRESS: "#3b82f6",
    ActivityStatus.COMPLETED: "#0F766E",
    ActivityStatus.DEACTIVATED: "#B91C1C",
}
OVERDUE_COLOR = "#DC2626"

STATUS_LABELS = {
    ActivityStatus.ACTIVE: "Hoạt động",
    ActivityStatus.IN_PROGRESS: "Đang thực hiện",
    ActivityStatus.COMPLETED: "Hoàn thành",
    ActivityStatus.DEACTIVATED: "Tạm dừng",
}
OVERDUE_LABEL = "Quá hạn"

SOIL_PREPARATION = "SoilPreparation"
SOIL_PREPARATION_COLOR = "#92400e"

TEXT_COLOR = "#ffffff"

StyleContext = namedtuple("StyleContext", ["status", "overdue", "activity_type"])
Style = namedtuple("Style", ["color", "label", "css_class"])


# ── Rules: StyleContext -> (color, css_class) or None ──


def soil_preparation_rule(ctx):
    if ctx.activity_type == SOIL_PREPARATION:
        return SOIL_PREPARATION_COLOR, "activity-soil-preparation"
    return None


def in_progress_rule(ctx):
    if ctx.status == ActivityStatus.IN_PROGRESS:
        return STATUS_COLORS[ActivityStatus.IN_PROGRESS], "activity-in-progress"
    return None


def overdue_rule(ctx):
    if ctx.overdue:
        return OVERDUE_COLOR, "activity-overdue"
    return None


def status_rule(ctx):
    if ctx.status in STATUS_COLORS:
        return STATUS_COLORS[ctx.status], f"activity-{ctx.status.lower().replace('_', '-')}"
    return STATUS_COLORS[ActivityStatus.ACTIVE], "activity-active"


BASE_RULES = [
    ("in_progress", in_progress_rule),
    ("overdue", overdue_rule),
    ("status", status_rule),
]

LAYER_RULES = {
    "badge": BASE_RULES,
    "board": BASE_RULES,
    "month": [("soil_preparation", soil_preparation_rule)] + BASE_RULES,
}


def normalize_status(status):
    return (status or "").upper()


def status_label(status):
    normalized = normalize_status(status)
    return STATUS_LABELS.get(normalized, normalized)


def resolve_style(ctx, rules=BASE_RULES):
    for _name, rule in rules:
        result = rule(ctx)
        if result is not None:
            color, css_class = result
            return Style(color=color, label=status_label(ctx.status), css_class=css_class)
    # status_rule always answers; only reachable with a custom rule list
    return Style(
        color=STATUS_COLORS[ActivityStatus.ACTIVE],
        label=status_label(ctx.status),
        css_class="activity-active",
    )


def style_for(status, overdue=False):
    """Colour and label for a status badge."""
    ctx = StyleContext(status=normalize_status(status), overdue=bool(overdue), activity_type="")
    return resolve_style(ctx)


def event_style(activity, overdue=False, layer="board"):
    """Style for an activity on a given layer ("month", "board" or "badge")."""
    ctx = StyleContext(
        status=activity.normalized_status,
        overdue=bool(overdue),
        activity_type=activity.activity_type or "",
    )
    return resolve_style(ctx, LAYER_RULES.get(layer, BASE_RULES))


def inline_style(style, **extra):
    """CSS declarations for an element painted with `style`."""
    declarations = {"background-color": style.color, "color": TEXT_COLOR}
    declarations.update({k.replace("_", "-"): v for k, v in extra.items()})
    return "; ".join(f"{k}: {v}" for k, v in declarations.items())
