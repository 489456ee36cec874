"""Interactive CLI chat simulator — walk through the ordering flow without WhatsApp."""

import asyncio

from pizza_bot.services.message_router import MessageRouter
from pizza_bot.services.session_manager import SessionManager

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
DIM = "\033[2m"
BOLD = "\033[1m"
RESET = "\033[0m"


async def main() -> None:
    print(f"\n{BOLD}{'=' * 52}")
    print("  🍕  Pizza Bot — Chat Simulator")
    print(f"{'=' * 52}{RESET}\n")

    print(f"{DIM}Type 'quit' to exit, 'switch' to change phone number,{RESET}")
    print(f"{DIM}     'sweep' to expire sessions older than the retention window{RESET}\n")

    phone = input(f"{YELLOW}Enter phone number to simulate: {RESET}").strip()
    if not phone:
        phone = "+15551234567"
    print(f"{DIM}Simulating as {phone}{RESET}\n")

    session_manager = SessionManager()
    router = MessageRouter(session_manager)

    while True:
        try:
            user_input = input(f"{BLUE}{BOLD}You:{RESET} ").strip()
        except (KeyboardInterrupt, EOFError):
            print(f"\n{DIM}Goodbye!{RESET}")
            break

        if user_input.lower() == "quit":
            print(f"{DIM}Goodbye!{RESET}")
            break

        if user_input.lower() == "switch":
            phone = input(f"{YELLOW}New phone number: {RESET}").strip()
            print(f"{DIM}Switched to {phone}{RESET}\n")
            continue

        if user_input.lower() == "sweep":
            session_manager.sweep_expired()
            print(f"{DIM}{session_manager.active_count} session(s) left{RESET}\n")
            continue

        reply = await router.handle_message(phone=phone, message=user_input)
        print(f"{GREEN}{BOLD}Agent:{RESET} {reply}\n")


if __name__ == "__main__":
    asyncio.run(main())
