import dataclasses
import os
from datetime import date

import requests
import streamlit as st

from storefront.core.config import settings
from storefront.engine.search import AMENITY_OPTIONS, default_filters, reset_filters, toggle_amenity
from storefront.models.domain import FilterState, SortOrder

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")


def get_json(path: str, **params) -> dict | list:
    resp = requests.get(f"{BACKEND_URL}{path}", params=params or None, timeout=10)
    resp.raise_for_status()
    return resp.json()


def send(method: str, path: str, payload: dict | None = None) -> dict:
    resp = requests.request(method, f"{BACKEND_URL}{path}", json=payload, timeout=15)
    if resp.status_code >= 400:
        detail = resp.json().get("detail", resp.text) if resp.content else resp.reason
        raise RuntimeError(detail)
    return resp.json()


def search(query: str, guests: int, price_max: float, amenities: list[str], sort: str) -> dict:
    return send(
        "POST",
        "/destinations/search",
        {
            "query": query,
            "guests": guests,
            "price_min": 0,
            "price_max": price_max,
            "amenities": amenities,
            "sort": sort,
        },
    )


def update_draft(draft_id: str, changes: dict) -> None:
    st.session_state["draft"] = send("PATCH", f"/bookings/drafts/{draft_id}", changes)


def current_filters() -> FilterState:
    return st.session_state.setdefault("filters", default_filters())


def on_price_change() -> None:
    state = current_filters()
    st.session_state["filters"] = dataclasses.replace(
        state, price_range=(0.0, float(st.session_state["price_max"]))
    )


def on_amenity_toggle(amenity: str) -> None:
    st.session_state["filters"] = toggle_amenity(current_filters(), amenity)


def on_sort_change() -> None:
    st.session_state["filters"] = dataclasses.replace(
        current_filters(), sort=SortOrder(st.session_state["sort"])
    )


def on_reset() -> None:
    state = reset_filters(current_filters())
    st.session_state["filters"] = state
    st.session_state["price_max"] = int(state.price_range[1])
    for amenity in AMENITY_OPTIONS:
        st.session_state[f"amenity-{amenity}"] = False


st.set_page_config(page_title="Travel Storefront", layout="wide")
st.title("Where every journey becomes an adventure")
st.caption("Backend: FastAPI | UI: Streamlit | Checkout simulated")

st.sidebar.subheader("Search")
query = st.sidebar.text_input("Where to?", placeholder="e.g. Dubai")
if len(query) >= settings.suggestion_min_length:
    hints = get_json("/destinations/suggestions", q=query)
    if hints:
        st.sidebar.caption("Suggestions: " + ", ".join(h["title"] for h in hints))
guests = st.sidebar.number_input("Guests", min_value=1, max_value=10, value=1)

if st.sidebar.button("Search"):
    st.session_state["criteria"] = {"query": query, "guests": int(guests)}
    st.session_state.pop("draft", None)

criteria = st.session_state.get("criteria")
draft = st.session_state.get("draft")

if draft is None:
    if criteria is None:
        destinations = get_json("/destinations")
        st.subheader(f"Found {len(destinations)} destinations for your adventure")
    else:
        filters = current_filters()
        price_limit = int(settings.price_range_max)
        st.session_state.setdefault("price_max", int(filters.price_range[1]))
        st.session_state.setdefault("sort", filters.sort.value)

        header = st.sidebar.columns([2, 1])
        header[0].subheader("Filters")
        header[1].button("Reset", on_click=on_reset)
        st.sidebar.slider(
            "Max price per night ($)", 0, price_limit, step=10, key="price_max", on_change=on_price_change
        )
        for amenity in AMENITY_OPTIONS:
            st.sidebar.checkbox(
                amenity, key=f"amenity-{amenity}", on_change=on_amenity_toggle, args=(amenity,)
            )
        st.radio(
            "Sort by", [s.value for s in SortOrder], horizontal=True, key="sort", on_change=on_sort_change
        )

        result = search(
            criteria["query"],
            criteria["guests"],
            filters.price_range[1],
            sorted(filters.selected_amenities),
            filters.sort.value,
        )
        destinations = result["results"]
        st.subheader(f"{criteria['query'] or 'Exploring all'} · {criteria['guests']} guests")
        if not destinations:
            st.info("No matches found. Try adjusting your price range or removing some amenity filters.")
            st.button("Clear all filters", on_click=on_reset)

    for place in destinations:
        with st.container(border=True):
            cols = st.columns([1, 3, 1])
            cols[0].image(place["image"], use_container_width=True)
            cols[1].markdown(
                f"**{place['title']}** · {place['location']} · ★ {place['rating']}  \n"
                f"{place['description']}  \n"
                f"{', '.join(place['amenities'])}"
            )
            cols[2].metric("Per night", f"${place['price']:.0f}")
            if cols[2].button("View deal", key=f"view-{place['id']}"):
                payload = {"destination_id": place["id"], "adults": (criteria or {}).get("guests", 1)}
                st.session_state["draft"] = send("POST", "/bookings/drafts", payload)
                st.rerun()
else:
    destination = get_json(f"/destinations/{draft['destination_id']}")
    draft_id = draft["draft_id"]
    if st.button("← Back to results"):
        st.session_state.pop("draft", None)
        st.rerun()

    st.header(f"{destination['title']} · {destination['location']}")
    st.write(destination["description"])
    left, right = st.columns([2, 1])

    with left:
        st.subheader("Choose your room")
        total_guests = draft["adults"] + draft["children"]
        for room in destination["rooms"]:
            selected = draft["selected_room_id"] == room["id"]
            label = f"{'✔ ' if selected else ''}{room['name']} · {room['type']} · fits {room['capacity']} · ${room['price']:.0f}/night"
            if st.button(label, key=f"room-{room['id']}"):
                update_draft(draft_id, {"selected_room_id": room["id"]})
                st.rerun()
            if total_guests > room["capacity"]:
                st.caption(f"Auto-adding rooms for {total_guests} guests")

        if destination["vehicles"]:
            st.subheader("Rent a vehicle")
            vehicle = draft["vehicle"]
            for item in destination["vehicles"]:
                active = vehicle["vehicle_id"] == item["id"] and vehicle["state"] == "selected"
                label = f"{'✔ ' if active else ''}{item['name']} · {item['seats']} seats · ${item['price']:.0f}/day"
                if st.button(label, key=f"vehicle-{item['id']}"):
                    st.session_state["draft"] = send("POST", f"/bookings/drafts/{draft_id}/vehicle/{item['id']}")
                    st.rerun()

            if vehicle["state"] == "pending_verification":
                with st.form("vehicle_documents"):
                    st.markdown(f"**Verify documents to rent {vehicle['vehicle_name']}**")
                    dl_number = st.text_input("DL Number (optional)")
                    dl_image = st.file_uploader("Driving License", type=["png", "jpg", "jpeg", "pdf"])
                    id_image = st.file_uploader("Identity card", type=["png", "jpg", "jpeg", "pdf"])
                    verify = st.form_submit_button("Verify & Add Vehicle")
                if verify:
                    try:
                        st.session_state["draft"] = send(
                            "POST",
                            f"/bookings/drafts/{draft_id}/vehicle/verify",
                            {
                                "license_number": dl_number or None,
                                "license_image": dl_image.name if dl_image else None,
                                "identity_image": id_image.name if id_image else None,
                            },
                        )
                        st.rerun()
                    except RuntimeError as exc:
                        st.error(str(exc))
                if st.button("Cancel vehicle"):
                    st.session_state["draft"] = send("DELETE", f"/bookings/drafts/{draft_id}/vehicle")
                    st.rerun()

    with right:
        quote = draft["quote"]
        st.metric("Total", f"${quote['grand_total']:.0f}", help=f"${quote['nightly_rate']:.0f} / night per room")
        check_in = st.date_input("Check-in", value=date.fromisoformat(draft["check_in"]) if draft["check_in"] else None)
        check_out = st.date_input("Check-out", value=date.fromisoformat(draft["check_out"]) if draft["check_out"] else None)
        adults = st.number_input("Adults", min_value=1, value=draft["adults"])
        children = st.number_input("Kids", min_value=0, value=draft["children"])
        include_hall = False
        if destination["has_banquet_hall"]:
            include_hall = st.checkbox("Add Banquet Hall (+$500 flat fee)", value=draft["include_hall"])

        changes = {
            "check_in": check_in.isoformat() if isinstance(check_in, date) else None,
            "check_out": check_out.isoformat() if isinstance(check_out, date) else None,
            "adults": int(adults),
            "children": int(children),
            "include_hall": include_hall,
        }
        current = {k: draft[k] for k in changes}
        if changes != current:
            update_draft(draft_id, changes)
            st.rerun()

        if quote["is_bookable"]:
            for item in quote["line_items"]:
                st.markdown(f"- {item['label']}: **${item['amount']:.0f}**")
            units = quote["room_units_needed"]
            if st.button(f"Reserve {units} Room{'s' if units > 1 else ''}", type="primary"):
                try:
                    confirmation = send("POST", f"/bookings/drafts/{draft_id}/checkout")
                    st.success(f"Booking {confirmation['reference'][:8]} confirmed: ${confirmation['total']:.0f}")
                except RuntimeError as exc:
                    st.error(f"Checkout failed: {exc}")
        else:
            st.button("Select a Room", disabled=True)
