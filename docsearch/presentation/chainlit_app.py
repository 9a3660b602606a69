import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import chainlit as cl

from docsearch.config.settings import settings
from docsearch.container import configure_container, container
from docsearch.core.models.view import RenderedView
from docsearch.core.services.session import SearchSession

configure_container(settings)

TOGGLE_FILTER = "toggle_filter"


def _filter_actions(session: SearchSession) -> list[cl.Action]:
    actions = []
    for category in session.categories:
        label = f"✓ {category}" if category in session.filters else category
        actions.append(
            cl.Action(name=TOGGLE_FILTER, payload={"category": category}, label=label)
        )
    return actions


async def _send_view(session: SearchSession, view: RenderedView) -> None:
    # Filter chips are also sent as actions.
    await cl.Message(content=view.html, actions=_filter_actions(session)).send()


@cl.on_chat_start
async def start():
    session = container.resolve(SearchSession)
    cl.user_session.set("search_session", session)

    await cl.Message(
        content="Type something to get started! Every message is a search query.",
        actions=_filter_actions(session),
    ).send()


@cl.on_message
async def main(message: cl.Message):
    session: SearchSession = cl.user_session.get("search_session")
    revision = session.on_input(message.content)
    view = await session.wait_for(revision)
    if view is not None:
        await _send_view(session, view)


@cl.action_callback(TOGGLE_FILTER)
async def on_toggle_filter(action: cl.Action):
    session: SearchSession = cl.user_session.get("search_session")
    revision = session.on_filter_click(action.payload["category"])
    view = await session.wait_for(revision)
    if view is not None:
        await _send_view(session, view)


@cl.on_chat_end
async def end():
    session: SearchSession | None = cl.user_session.get("search_session")
    if session is not None:
        session.close()
