"""Tests for the step agents — each agent is exercised without a session store."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pizza_bot.agents.checkout_agent import CustomerInfoAgent
from pizza_bot.agents.menu_agent import GreetingAgent, MainMenuAgent
from pizza_bot.agents.order_agent import (
    OrderConfirmationAgent,
    SizeSelectionAgent,
    ToppingsSelectionAgent,
)
from pizza_bot.models.menu import PIZZA_MENU
from pizza_bot.models.order import Order, Step
from pizza_bot.services import messages

SMALL, MEDIUM, LARGE = PIZZA_MENU.sizes
PEPPERONI, MUSHROOMS, OLIVES, EXTRA_CHEESE, SAUSAGE, BELL_PEPPERS = PIZZA_MENU.toppings


# ──────────────────────────────────────────────────────────
# Greeting
# ──────────────────────────────────────────────────────────
@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["hi", "", "1", "anything at all"])
async def test_greeting_always_shows_main_menu(text):
    response = await GreetingAgent().handle(text, Order())

    assert response.next_step == Step.MAIN_MENU
    assert response.reply_text == messages.main_menu_message()


# ──────────────────────────────────────────────────────────
# Main menu
# ──────────────────────────────────────────────────────────
@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["1", "order", "ORDER"])
async def test_main_menu_order_starts_size_selection(text):
    response = await MainMenuAgent().handle(text, Order())

    assert response.next_step == Step.SIZE_SELECTION
    assert response.reply_text == messages.size_selection_message()
    assert "1️⃣ Small - $10.00" in response.reply_text
    assert "3️⃣ Large - $20.00" in response.reply_text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "text, expected",
    [
        ("2", messages.full_menu_message()),
        ("menu", messages.full_menu_message()),
        ("3", messages.TRACKING_MESSAGE),
        ("track", messages.TRACKING_MESSAGE),
        ("4", messages.CONTACT_MESSAGE),
        ("contact", messages.CONTACT_MESSAGE),
        ("5", messages.MAIN_MENU_REPROMPT),
        ("pizza please", messages.MAIN_MENU_REPROMPT),
        ("", messages.MAIN_MENU_REPROMPT),
    ],
)
async def test_main_menu_other_options_stay_in_main_menu(text, expected):
    response = await MainMenuAgent().handle(text, Order())

    assert response.next_step == Step.MAIN_MENU
    assert response.reply_text == expected


# ──────────────────────────────────────────────────────────
# Size selection
# ──────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_size_two_selects_medium_and_clears_toppings():
    order = Order(toppings=[PEPPERONI])

    response = await SizeSelectionAgent().handle("2", order)

    assert response.next_step == Step.TOPPINGS_SELECTION
    assert response.order.size.name == "Medium"
    assert response.order.toppings == []
    assert response.reply_text == messages.toppings_selection_message()
    # The incoming order is left untouched
    assert order.size is None
    assert order.toppings == [PEPPERONI]


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["0", "4", "-1", "two", "", "2.5", "1 2"])
async def test_invalid_size_stays_put(text):
    order = Order()

    response = await SizeSelectionAgent().handle(text, order)

    assert response.next_step == Step.SIZE_SELECTION
    assert response.reply_text == messages.INVALID_SIZE_MESSAGE
    assert "1, 2, or 3" in response.reply_text
    assert response.order is order


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["+2", "0_2", "２", "٢", " 2"])
async def test_size_accepts_only_plain_ascii_digits(text):
    response = await SizeSelectionAgent().handle(text, Order())

    assert response.next_step == Step.SIZE_SELECTION
    assert response.order.size is None


# ──────────────────────────────────────────────────────────
# Toppings selection
# ──────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_toppings_deduplicated_within_one_message():
    order = Order(size=MEDIUM)

    response = await ToppingsSelectionAgent().handle("1 3 1", order)

    assert response.next_step == Step.TOPPINGS_SELECTION
    assert response.order.toppings == [PEPPERONI, OLIVES]
    assert response.reply_text.count("Pepperoni") == 1
    assert "Olives - $1.00" in response.reply_text
    assert "reply 'done' to continue" in response.reply_text


@pytest.mark.asyncio
async def test_toppings_already_chosen_are_not_listed_again():
    order = Order(size=MEDIUM, toppings=[PEPPERONI])

    response = await ToppingsSelectionAgent().handle("1 2", order)

    assert response.order.toppings == [PEPPERONI, MUSHROOMS]
    assert "Mushrooms" in response.reply_text
    assert "Pepperoni" not in response.reply_text


@pytest.mark.asyncio
async def test_bad_tokens_are_ignored_when_some_are_valid():
    order = Order(size=SMALL)

    response = await ToppingsSelectionAgent().handle("x 6 99 0", order)

    assert response.order.toppings == [BELL_PEPPERS]


@pytest.mark.asyncio
async def test_non_ascii_and_signed_topping_tokens_are_ignored():
    order = Order(size=SMALL)

    response = await ToppingsSelectionAgent().handle("+1 0_3 ２ ٥ 4", order)

    assert response.order.toppings == [EXTRA_CHEESE]


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["99", "cheese", "", "0 7"])
async def test_no_valid_toppings_returns_help(text):
    order = Order(size=MEDIUM, toppings=[OLIVES])

    response = await ToppingsSelectionAgent().handle(text, order)

    assert response.next_step == Step.TOPPINGS_SELECTION
    assert response.reply_text == messages.TOPPINGS_HELP_MESSAGE
    assert response.order is order


@pytest.mark.asyncio
async def test_repeating_existing_toppings_returns_help():
    order = Order(size=MEDIUM, toppings=[PEPPERONI])

    response = await ToppingsSelectionAgent().handle("1", order)

    assert response.reply_text == messages.TOPPINGS_HELP_MESSAGE
    assert response.order.toppings == [PEPPERONI]


@pytest.mark.asyncio
async def test_done_shows_summary_with_total():
    order = Order(size=MEDIUM, toppings=[PEPPERONI, MUSHROOMS])

    response = await ToppingsSelectionAgent().handle("Done", order)

    assert response.next_step == Step.ORDER_CONFIRMATION
    assert response.order.toppings == [PEPPERONI, MUSHROOMS]
    assert "💰 Total: $18.50" in response.reply_text
    assert "Medium Pizza - $15.00" in response.reply_text


@pytest.mark.asyncio
async def test_done_with_pepperoni_and_olives():
    order = Order(size=MEDIUM, toppings=[PEPPERONI, OLIVES])

    response = await ToppingsSelectionAgent().handle("done", order)

    assert "💰 Total: $18.00" in response.reply_text


@pytest.mark.asyncio
async def test_none_clears_toppings():
    order = Order(size=LARGE, toppings=[SAUSAGE, EXTRA_CHEESE])

    response = await ToppingsSelectionAgent().handle("none", order)

    assert response.next_step == Step.ORDER_CONFIRMATION
    assert response.order.toppings == []
    assert "Toppings" not in response.reply_text
    assert "💰 Total: $20.00" in response.reply_text


# ──────────────────────────────────────────────────────────
# Order confirmation
# ──────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_confirm_asks_for_address():
    order = Order(size=SMALL)

    response = await OrderConfirmationAgent().handle("confirm", order)

    assert response.next_step == Step.CUSTOMER_INFO
    assert response.reply_text == messages.ADDRESS_REQUEST_MESSAGE
    assert response.order is order


@pytest.mark.asyncio
async def test_cancel_empties_order_and_shows_main_menu():
    order = Order(size=SMALL, toppings=[OLIVES])

    response = await OrderConfirmationAgent().handle("cancel", order)

    assert response.next_step == Step.MAIN_MENU
    assert response.order == Order()
    assert response.reply_text == "❌ Order cancelled. " + messages.main_menu_message()


@pytest.mark.asyncio
async def test_confirmation_reprompts_on_anything_else():
    response = await OrderConfirmationAgent().handle("yes", Order(size=SMALL))

    assert response.next_step == Step.ORDER_CONFIRMATION
    assert response.reply_text == messages.CONFIRMATION_REPROMPT


# ──────────────────────────────────────────────────────────
# Customer info
# ──────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_address_completes_order():
    agent = CustomerInfoAgent(reference_generator=lambda: "ABCD1234")
    order = Order(size=SMALL, toppings=[MUSHROOMS])

    response = await agent.handle("123 Main St", order)

    assert response.next_step == Step.MAIN_MENU
    assert response.order == Order()
    assert "Order #ABCD1234" in response.reply_text
    assert "🍕 Small Pizza" in response.reply_text
    assert "Toppings: Mushrooms" in response.reply_text
    assert "Address: 123 Main St" in response.reply_text
    assert "Total: $11.50" in response.reply_text
    assert "25-35 minutes" in response.reply_text


@pytest.mark.asyncio
async def test_address_without_toppings_says_none():
    agent = CustomerInfoAgent(reference_generator=lambda: "ZZZZ0000")

    response = await agent.handle("Flat 2, 9 High Road", Order(size=LARGE))

    assert "Toppings: None" in response.reply_text
    assert "Total: $20.00" in response.reply_text


@pytest.mark.asyncio
async def test_empty_address_is_requested_again():
    agent = CustomerInfoAgent(reference_generator=lambda: "UNUSED00")
    order = Order(size=SMALL)

    response = await agent.handle("", order)

    assert response.next_step == Step.CUSTOMER_INFO
    assert response.reply_text == messages.ADDRESS_REQUEST_MESSAGE
    assert response.order is order


@pytest.mark.asyncio
async def test_each_completed_order_gets_a_fresh_reference():
    references = iter(["FIRST001", "SECOND02"])
    agent = CustomerInfoAgent(reference_generator=lambda: next(references))

    first = await agent.handle("1 Elm St", Order(size=SMALL))
    second = await agent.handle("1 Elm St", Order(size=SMALL))

    assert "#FIRST001" in first.reply_text
    assert "#SECOND02" in second.reply_text


def test_summary_and_final_totals_agree():
    order = Order(size=LARGE, toppings=[EXTRA_CHEESE, SAUSAGE, BELL_PEPPERS])
    order.address = "5 Oak Ave"

    assert order.total == Decimal("27.5")
    assert "$27.50" in messages.order_summary_message(order)
    assert "$27.50" in messages.order_confirmed_message(order, "REF00001")
