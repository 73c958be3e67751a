from enum import Enum


class UserRole(str, Enum):
    """Membership tiers, lowest first.

    The declaration order is the tier order. Nothing in the account
    service ranks roles numerically.
    """

    MEMBER = "member"
    VIP_HERO = "vip-hero"
    VIP_LEGEND = "vip-legend"
    VIP_SUPREME = "vip-supreme"
    PARTNER = "partner"
    HELPER = "helper"
    MODERATOR = "moderator"
    MODERATOR_PLUS = "moderator+"
    MANAGER = "manager"
    MANAGER_PLUS = "manager+"
    MASTER = "master"
