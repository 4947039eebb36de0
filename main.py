"""
Plot Ownership Console - Main Entry Point
==========================================
查询地块归属层级的控制台入口
"""

import logging
import sys

from plot_ownership.config.settings import PLOT_CONFIG
from plot_ownership.core.plot import normalize_player_id
from plot_ownership.core.tier_config import UnknownOwnershipTypeError, describe_tiers, get_configured_tier, resolve_tier
from plot_ownership.data.plot_store import RedisPlotView, plot_exists

logger = logging.getLogger(__name__)


def print_help() -> None:
    """打印帮助信息"""
    help_text = """
    📖 指令帮助:
    ══════════════════════════════════════════════════════════
       /tiers                          - 列出所有归属层级及别名
       /check <层级> <玩家ID> <地块ID>  - 玩家是否满足该层级
       /players <层级> <地块ID>         - 列出满足该层级的所有玩家
       /help                           - 显示此帮助
       /quit 或 /exit                  - 退出
    ══════════════════════════════════════════════════════════
    """
    print(help_text)


def check_player(tier_name: str, player_id: str, plot_id: str) -> str:
    try:
        ownership_type = resolve_tier(tier_name)
    except UnknownOwnershipTypeError as exc:
        return f"❌ {exc}"
    if not plot_exists(plot_id):
        return f"❌ 地块不存在: {plot_id}"

    plot = RedisPlotView(plot_id)
    player_id = normalize_player_id(player_id)
    if ownership_type.is_valid_plot_for_player(player_id, plot):
        return f"✅ {player_id} 满足 {ownership_type.canonical_name} @ {plot_id}"
    return f"⛔ {player_id} 不满足 {ownership_type.canonical_name} @ {plot_id}"


def list_players(tier_name: str, plot_id: str) -> str:
    try:
        ownership_type = resolve_tier(tier_name)
    except UnknownOwnershipTypeError as exc:
        return f"❌ {exc}"
    if not plot_exists(plot_id):
        return f"❌ 地块不存在: {plot_id}"

    players = sorted(ownership_type.get_applicable_players(RedisPlotView(plot_id)))
    if not players:
        return f"({ownership_type.canonical_name} @ {plot_id}: 无玩家)"
    lines = [f"👥 {ownership_type.canonical_name} @ {plot_id} ({len(players)}):"]
    lines.extend(f"   - {player}" for player in players)
    return "\n".join(lines)


def handle_command(user_input: str) -> bool:
    """Run one slash command. Returns False when the console should exit."""
    parts = user_input.split()
    if not parts:
        return True
    command, args = parts[0].lower(), parts[1:]

    if command in ("/quit", "/exit"):
        return False
    if command == "/help":
        print_help()
    elif command == "/tiers":
        print(describe_tiers())
    elif command == "/check":
        if len(args) != 3:
            print("用法: /check <层级> <玩家ID> <地块ID>")
        else:
            print(check_player(*args))
    elif command == "/players":
        if len(args) != 2:
            print("用法: /players <层级> <地块ID>")
        else:
            print(list_players(*args))
    else:
        print(f"❓ 未知指令: {command}，输入 /help 查看帮助")
    return True


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        default_tier = get_configured_tier()
    except UnknownOwnershipTypeError as exc:
        print(f"❌ {exc}")
        sys.exit(1)

    print(f"🏠 Plot ownership console (默认层级: {default_tier.canonical_name}, "
          f"Redis: {PLOT_CONFIG['redis']['host']}:{PLOT_CONFIG['redis']['port']})")
    print_help()

    while True:
        try:
            user_input = input("👤 > ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        try:
            if not handle_command(user_input):
                break
        except Exception as exc:  # noqa: BLE001
            logger.error("指令执行失败 %s: %s", user_input, exc)
            print(f"❌ 指令执行失败: {exc}")

    print("👋 再见")


if __name__ == "__main__":
    main()
