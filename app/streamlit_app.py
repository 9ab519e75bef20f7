"""Streamlit app for the shift rotation."""

import calendar
import io
import logging
from datetime import date, datetime, timedelta

import pandas as pd
import streamlit as st
from rotation.config import log_level, preferences_path
from rotation.errors import RosterError
from rotation.lookahead import find_adjacent_group, find_next_shift
from rotation.models import RosterConfig, load_roster
from rotation.preferences import GroupSelection, JsonFilePreferenceStore
from rotation.resolver import roster_for_date
from rotation.timing import shift_start_hour

logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Page config
st.set_page_config(page_title="Schichtplan", page_icon="🔄", layout="centered")

WEEKDAY_LABELS = ["Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"]


@st.cache_resource
def get_roster() -> RosterConfig:
    return load_roster()


def main() -> None:
    """Main app entry point."""
    try:
        roster = get_roster()
    except (OSError, ValueError) as e:
        st.error(f"❌ Fehler beim Laden des Schichtplans: {e}")
        return

    if "selection" not in st.session_state:
        st.session_state.selection = GroupSelection(JsonFilePreferenceStore(preferences_path()))
    selection: GroupSelection = st.session_state.selection

    st.sidebar.title("🔄 Schichtplan")

    try:
        current = selection.group
    except (OSError, ValueError) as e:
        st.sidebar.error(f"❌ Gespeicherte Gruppe nicht lesbar: {e}")
        current = selection.default
    if current not in roster.groups:
        current = roster.groups[0]

    def _on_group_change() -> None:
        try:
            selection.set(st.session_state.group_select, roster)
        except (OSError, ValueError) as e:
            st.sidebar.error(f"❌ Gruppe konnte nicht gespeichert werden: {e}")

    st.sidebar.selectbox(
        "Gruppe",
        roster.groups,
        index=roster.groups.index(current),
        key="group_select",
        on_change=_on_group_change,
    )
    page = st.sidebar.radio("Navigation", ["Nächste Schicht", "Kalender"])

    if page == "Nächste Schicht":
        page_next_shift(roster, current)
    elif page == "Kalender":
        page_calendar(roster, current)


def _shift_title(roster: RosterConfig, name: str) -> str:
    shift = roster.shift_type(name)
    return shift.title if shift and shift.title else name


def _shift_css(roster: RosterConfig, name: str) -> str:
    hue = roster.shift_hue(name)
    if hue is None:
        return ""
    lightness = roster.shift_text_lightness(name) or 30
    return f"background-color: hsl({hue}, 70%, 88%); color: hsl({hue}, 60%, {lightness}%)"


def page_next_shift(roster: RosterConfig, group: str) -> None:
    """Page: next working shift of the selected group and its neighbours."""
    st.title(f"Gruppe {group}")

    now = datetime.now()
    try:
        upcoming = find_next_shift(roster, group, now)
        previous = find_adjacent_group(roster, group, "previous", now)
        following = find_adjacent_group(roster, group, "next", now)
    except RosterError as e:
        st.error(f"❌ {e}")
        return

    start_hour = shift_start_hour(upcoming.label, upcoming.shift_date)
    weekday = WEEKDAY_LABELS[upcoming.shift_date.weekday()]
    title = _shift_title(roster, upcoming.label.value)

    st.markdown("### Nächste Schicht")
    st.markdown(
        f"<div style='padding: 1rem; border-radius: 0.5rem; {_shift_css(roster, upcoming.label.value)}'>"
        f"<b>{title}</b> ({upcoming.label.value})<br>"
        f"{weekday}, {upcoming.shift_date.strftime('%d.%m.%Y')} ab {start_hour:02d}:00 Uhr"
        "</div>",
        unsafe_allow_html=True,
    )
    if upcoming.shift_date == now.date():
        st.caption("Ablösung eine Stunde vor Schichtbeginn.")

    st.markdown("---")
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Ablösung von", f"Gruppe {previous.group}", help=_shift_title(roster, previous.label.value))
        st.caption(f"{previous.label.value} am {previous.shift_date.strftime('%d.%m.%Y')}")
    with col2:
        st.metric("Übergabe an", f"Gruppe {following.group}", help=_shift_title(roster, following.label.value))
        st.caption(f"{following.label.value} am {following.shift_date.strftime('%d.%m.%Y')}")


def page_calendar(roster: RosterConfig, group: str) -> None:
    """Page: month view of every group."""
    st.title("📆 Kalender")

    today = date.today()
    col1, col2 = st.columns(2)
    with col1:
        year = st.number_input("Jahr", min_value=1900, max_value=2999, value=today.year, step=1)
    with col2:
        month = st.selectbox("Monat", list(range(1, 13)), index=today.month - 1)

    first = date(int(year), int(month), 1)
    days = calendar.monthrange(first.year, first.month)[1]

    rows = []
    try:
        for offset in range(days):
            current = first + timedelta(days=offset)
            row = {"Datum": f"{current.strftime('%d.%m.%Y')} ({WEEKDAY_LABELS[current.weekday()]})"}
            row.update({g: label.value for g, label in roster_for_date(roster, current).items()})
            rows.append(row)
    except RosterError as e:
        st.error(f"❌ {e}")
        return

    df = pd.DataFrame(rows).set_index("Datum")

    def color_shift(val: str) -> str:
        return _shift_css(roster, val)

    st.caption(f"Ausgewählte Gruppe: {group}")
    st.dataframe(df.style.map(color_shift), use_container_width=True, height=35 * days + 38)

    csv_buffer = io.StringIO()
    df.to_csv(csv_buffer, encoding="utf-8-sig")
    st.download_button(
        label="📥 Als CSV herunterladen",
        data=csv_buffer.getvalue(),
        file_name=f"schichtplan_{first.strftime('%Y-%m')}.csv",
        mime="text/csv",
    )


if __name__ == "__main__":
    main()
