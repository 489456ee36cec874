"""Reply texts — menu rendering and order summaries sent back to customers."""

from __future__ import annotations

from decimal import Decimal

from pizza_bot.models.menu import PIZZA_MENU, Menu, Topping
from pizza_bot.models.order import Order

KEYCAP = "️⃣"

TRACKING_MESSAGE = (
    "🚚 Order tracking coming soon! "
    "For now, your pizza will be ready in 20-30 minutes."
)

CONTACT_MESSAGE = (
    "📞 Contact us at: (555) 123-PIZZA\n"
    "📧 Email: orders@tonyspizza.com\n\n"
    "Reply 'menu' to return to main menu."
)

MAIN_MENU_REPROMPT = (
    "Please reply with 1, 2, 3, or 4 to make your selection.\n\n"
    "Or type 'menu' to see options again."
)

INVALID_SIZE_MESSAGE = "Please select a valid size (1, 2, or 3)."

TOPPINGS_HELP_MESSAGE = (
    "Please enter valid topping numbers, 'done' to finish, "
    "or 'none' for plain pizza."
)

CONFIRMATION_REPROMPT = (
    "Please reply 'confirm' to place your order or 'cancel' to start over."
)

ADDRESS_REQUEST_MESSAGE = "📝 Great! Please provide your delivery address:"

ORDER_CANCELLED_PREFIX = "❌ Order cancelled. "

ERROR_MESSAGE = "Sorry, something went wrong. Please try again."


def format_price(amount: Decimal) -> str:
    """Render a money amount with exactly two decimals: ``$11.50``."""
    return f"${amount:.2f}"


def main_menu_message() -> str:
    return (
        "🍕 Welcome to Tony's Pizza Bot! 🍕\n\n"
        "What would you like to do?\n\n"
        f"1{KEYCAP} Order a Pizza\n"
        f"2{KEYCAP} View Menu\n"
        f"3{KEYCAP} Track Order\n"
        f"4{KEYCAP} Contact Us\n\n"
        "Reply with the number of your choice!"
    )


def order_cancelled_message() -> str:
    return ORDER_CANCELLED_PREFIX + main_menu_message()


def full_menu_message(menu: Menu = PIZZA_MENU) -> str:
    lines = ["🍕 TONY'S PIZZA MENU 🍕", "", "📏 SIZES:"]
    lines += [f"• {size.name} - {format_price(size.price)}" for size in menu.sizes]
    lines += ["", "🧀 TOPPINGS:"]
    lines += [
        f"• {topping.name} - {format_price(topping.price)}"
        for topping in menu.toppings
    ]
    lines += ["", "Reply 'order' to start ordering or 'menu' for main options!"]
    return "\n".join(lines)


def size_selection_message(menu: Menu = PIZZA_MENU) -> str:
    lines = ["🍕 Choose your pizza size:", ""]
    lines += [
        f"{size.id}{KEYCAP} {size.name} - {format_price(size.price)}"
        for size in menu.sizes
    ]
    lines += ["", "Reply with the number of your choice!"]
    return "\n".join(lines)


def toppings_selection_message(menu: Menu = PIZZA_MENU) -> str:
    lines = ["🧀 Choose your toppings (optional):", ""]
    lines += [
        f"{position}{KEYCAP} {topping.name} - {format_price(topping.price)}"
        for position, topping in enumerate(menu.toppings, start=1)
    ]
    lines += [
        "",
        "✅ Reply 'done' when finished",
        "❌ Reply 'none' for plain pizza",
        "📝 You can select multiple toppings by sending their numbers "
        "(e.g., '1 3 5')",
    ]
    return "\n".join(lines)


def toppings_added_message(added: list[Topping]) -> str:
    """List only the toppings added by the latest message."""
    lines = ["✅ Added toppings:"]
    lines += [f"• {topping.name} - {format_price(topping.price)}" for topping in added]
    lines += ["", "Add more toppings, or reply 'done' to continue."]
    return "\n".join(lines)


def order_summary_message(order: Order) -> str:
    """Summary shown before the customer confirms or cancels.

    The order must already have a size.
    """
    lines = [
        "📋 Order Summary:",
        "",
        f"🍕 {order.size.name} Pizza - {format_price(order.size.price)}",
    ]
    if order.toppings:
        lines += ["", "🧀 Toppings:"]
        lines += [
            f"• {topping.name} - {format_price(topping.price)}"
            for topping in order.toppings
        ]
    lines += [
        "",
        f"💰 Total: {format_price(order.total)}",
        "",
        "✅ Reply 'confirm' to place order",
        "❌ Reply 'cancel' to start over",
    ]
    return "\n".join(lines)


def order_confirmed_message(order: Order, reference: str) -> str:
    return (
        "🎉 Order confirmed!\n\n"
        f"📋 Order #{reference}\n"
        f"🍕 {order.size.name} Pizza\n"
        f"🧀 Toppings: {order.topping_names}\n"
        f"📍 Address: {order.address}\n"
        f"💰 Total: {format_price(order.total)}\n\n"
        "⏰ Estimated delivery: 25-35 minutes\n"
        "📞 Questions? Call (555) 123-PIZZA\n\n"
        "Thanks for choosing Tony's Pizza! 🍕\n\n"
        "Reply 'menu' to start a new order!"
    )
