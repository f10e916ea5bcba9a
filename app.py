import streamlit as st
import pandas as pd
import altair as alt
import plotly.graph_objects as go

import config
import leaderboard_engine as lbe
import scoreboard_feed

config.configure_logging()

# ------------------------------------------------------------
# Page config
# ------------------------------------------------------------
st.set_page_config(
    page_title="Golf Groups",
    page_icon="⛳",
    layout="wide",
    initial_sidebar_state="collapsed",
)

GROUPS = lbe.build_groups(config.GROUPS)

# ------------------------------------------------------------
# Session state defaults
# ------------------------------------------------------------

DEFAULTS = {
    "snapshot": None,      # last ScoreboardSnapshot, replaced per fetch
    "is_loading": True,    # busy flag; refresh is disabled while set
}


def init_session_state():
    for k, v in DEFAULTS.items():
        if k not in st.session_state:
            st.session_state[k] = v


init_session_state()


def request_refresh():
    st.session_state.is_loading = True


def force_reload():
    scoreboard_feed.clear_cache()
    request_refresh()


# ------------------------------------------------------------
# Styling
# ------------------------------------------------------------

st.markdown(
    """
    <style>
    h1 {
        color: #166534;
        text-align: center;
    }
    .group-total {
        color: #15803d;
        font-weight: 700;
        float: right;
    }
    .leader-card {
        border: 2px solid #22c55e;
        border-radius: 8px;
        padding: 0.25rem 0.75rem;
        background-color: #dcfce7;
    }
    .player-meta {
        color: #6b7280;
        font-size: 0.85rem;
    }
    .wildcard-tag {
        color: #16a34a;
        font-size: 0.75rem;
    }
    .skeleton {
        background-color: #e5e7eb;
        border-radius: 4px;
        height: 1.1rem;
        margin: 0.6rem 0;
        animation: pulse 1.5s ease-in-out infinite;
    }
    @keyframes pulse {
        0%, 100% { opacity: 1; }
        50% { opacity: 0.5; }
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ------------------------------------------------------------
# Sidebar
# ------------------------------------------------------------

with st.sidebar:
    st.header("Data")
    st.caption(
        f"Scores come from the ESPN PGA scoreboard and are cached for "
        f"{config.CACHE_TTL_SECONDS // 60} minutes."
    )
    if config.GOLF_PROXY_URL:
        st.caption(f"Reading through proxy: `{config.GOLF_PROXY_URL}`")
    st.button(
        "Force reload from ESPN",
        on_click=force_reload,
        disabled=st.session_state.is_loading,
        help="Drops the cached scoreboard before fetching again.",
    )


# ------------------------------------------------------------
# Rendering helpers
# ------------------------------------------------------------

def render_skeleton_cards(n_cards=3, n_rows=3):
    for col in st.columns(n_cards):
        with col:
            with st.container(border=True):
                st.markdown("<div class='skeleton' style='width:6rem'></div>", unsafe_allow_html=True)
                for _ in range(n_rows):
                    st.markdown(
                        "<div class='skeleton' style='width:100%'></div>",
                        unsafe_allow_html=True,
                    )


def _progress_text(line: lbe.PlayerLine) -> str:
    parts = []
    if line.today_score:
        parts.append(line.today_score)
    if line.progress_label == "Thru":
        parts.append(f"{'| ' if parts else ''}Thru: {line.progress}")
    elif line.progress_label == "Tee":
        parts.append(f"Tee: {line.progress}")
    return " ".join(parts)


def render_player_line(line: lbe.PlayerLine):
    name_col, score_col = st.columns([4, 1])
    with name_col:
        st.markdown(f"**{line.name}**")
        if line.role == "wildcard":
            st.markdown("<div class='wildcard-tag'>Wildcard</div>", unsafe_allow_html=True)
        if line.found:
            meta = _progress_text(line)
            if meta:
                st.markdown(f"<div class='player-meta'>{meta}</div>", unsafe_allow_html=True)
            if line.today_over_under:
                st.markdown(
                    f"<div class='player-meta'>Today: {line.today_over_under}</div>",
                    unsafe_allow_html=True,
                )
    with score_col:
        st.markdown(f"**{line.score_display}**")


def render_group_card(standing: lbe.GroupStanding):
    with st.container(border=True):
        header_class = "leader-card" if standing.place == 1 else ""
        st.markdown(
            f"<div class='{header_class}'><h3>{standing.group.name}"
            f"<span class='group-total'>{standing.total_display}</span></h3></div>",
            unsafe_allow_html=True,
        )
        st.caption(standing.place_label)

        for line in standing.lines:
            if line.role == "wildcard":
                st.markdown("---")
            render_player_line(line)


def standings_frame(standings) -> pd.DataFrame:
    rows = []
    for s in standings:
        row = {"Place": s.place, "Group": s.group.name, "Total": s.total_display}
        for slot, line in zip(("Player 1", "Player 2", "Wildcard"), s.lines):
            row[slot] = f"{line.name} ({line.score_display})"
        rows.append(row)
    return pd.DataFrame(rows)


def draw_group_totals(standings):
    df = pd.DataFrame(
        {
            "group": [s.group.name for s in standings],
            "total": [s.total for s in standings],
            "display": [s.total_display for s in standings],
        }
    )
    bars = (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("group:N", sort=None, title="Group"),
            y=alt.Y("total:Q", title="Strokes to par (lower is better)"),
            color=alt.condition(alt.datum.total < 0, alt.value("#15803d"), alt.value("#b91c1c")),
            tooltip=["group", "display"],
        )
    )
    labels = bars.mark_text(dy=-8).encode(text="display:N")
    chart = alt.layer(bars, labels).properties(height=280, title="Group Totals")
    st.altair_chart(chart, use_container_width=True)


def draw_player_contributions(standings):
    fig = go.Figure()
    slots = ["Player 1", "Player 2", "Wildcard"]
    for i, slot in enumerate(slots):
        fig.add_trace(
            go.Bar(
                name=slot,
                x=[s.group.name for s in standings],
                y=[s.lines[i].score for s in standings],
                text=[s.lines[i].name for s in standings],
                hovertemplate="%{text}: %{y}<extra></extra>",
            )
        )
    fig.update_layout(
        barmode="relative",
        height=320,
        margin=dict(t=40, b=10, l=10, r=10),
        title="Score by Player",
        yaxis_title="To par",
    )
    st.plotly_chart(fig, use_container_width=True)


# ------------------------------------------------------------
# Main title & refresh
# ------------------------------------------------------------

snapshot = st.session_state.snapshot
event = snapshot.event if snapshot is not None else None
loading = st.session_state.is_loading

st.title(lbe.page_title(event))

_, button_col, _ = st.columns([2, 1, 2])
with button_col:
    st.button(
        "Refreshing..." if loading else "Refresh Data",
        on_click=request_refresh,
        disabled=loading,
        use_container_width=True,
        key="refresh",
    )

if snapshot is not None and snapshot.error and not loading:
    msg_col, retry_col = st.columns([6, 1])
    with msg_col:
        st.error(snapshot.error)
    with retry_col:
        st.button("Retry", on_click=request_refresh, key="retry")

# ------------------------------------------------------------
# Fetch cycle
# ------------------------------------------------------------

if loading:
    render_skeleton_cards(n_cards=max(1, len(GROUPS)))
    st.session_state.snapshot = scoreboard_feed.load_snapshot(config.GOLF_PROXY_URL or None)
    st.session_state.is_loading = False
    st.rerun()

# ============================================================
# Leaderboard
# ============================================================

standings = lbe.build_leaderboard(GROUPS, event, config.TEE_TIME_OFFSET_HOURS)

if snapshot is not None and snapshot.source == scoreboard_feed.SOURCE_FALLBACK:
    st.info("ESPN is unavailable right now. Showing a saved scoreboard snapshot.")

tab_groups, tab_standings, tab_info = st.tabs(["Groups", "Standings", "Info"])

with tab_groups:
    for col, standing in zip(st.columns(max(1, len(standings))), standings):
        with col:
            render_group_card(standing)

with tab_standings:
    st.dataframe(standings_frame(standings), use_container_width=True, hide_index=True)
    chart_col, breakdown_col = st.columns(2)
    with chart_col:
        draw_group_totals(standings)
    with breakdown_col:
        draw_player_contributions(standings)

with tab_info:
    st.markdown(
        "Each group scores the sum of its two players and its wildcard, relative to par. "
        "Lowest total leads. A player missing from the field shows **N/A** and counts as even."
    )
    if event is not None:
        st.caption(f"{event.name} · {event.date} · {len(event.competitors)} players in the field")
    if snapshot is not None:
        st.caption(f"Last fetched {snapshot.fetched_at:%Y-%m-%d %H:%M:%S} UTC ({snapshot.source})")
