"""
Main Streamlit application for the Country Select playground.

Entry point that ties together the backend modules (countries, options,
render, export, localization) into an interactive form where every option
of the country select can be tried out and the generated markup copied.
"""

import hashlib

import streamlit as st
import plotly.express as px

from countries import audit_region_membership, country_codes, find_non_iso_codes
from export import (
    build_options_dataframe,
    build_region_summary,
    export_config_json,
    export_options_csv,
    export_reference_csv,
    import_config_json,
)
from localization import load_localizer_json, localize
from options import LabelMode, build_country_options, resolve_display_name
from render import country_select


# ---------------------------------------------------------------------------
# Page configuration
# ---------------------------------------------------------------------------

st.set_page_config(page_title="Country Select", layout="wide")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LABEL_OPTIONS = {
    "English": LabelMode.ENGLISH.value,
    "Native": LabelMode.NATIVE.value,
    "Both": LabelMode.BOTH.value,
}

FIELD_OBJECT = "user"
FIELD_METHOD = "country"

# Imported config waiting to be applied before the widgets are created
PENDING_CONFIG_KEY = "_pending_config"


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------


def restore_config_to_session(config):
    """
    Write imported configuration values into st.session_state so widgets
    pick them up on the next rerun.

    Args:
        config (dict): Configuration dict from import_config_json.
    """
    known = country_codes()
    st.session_state["priority_input"] = [c for c in config["priority_countries"] if c in known]
    st.session_state["removed_input"] = [c for c in config["removed_countries"] if c in known]
    st.session_state["rest_of_world_input"] = config["rest_of_world"]
    st.session_state["world_regions_input"] = config["world_regions"]

    for label, value in LABEL_OPTIONS.items():
        if value == config["labels"]:
            st.session_state["labels_input"] = label
            break
    # End of the loop that matches the label mode
# End of function restore_config_to_session()


def apply_pending_config():
    """
    Apply a configuration queued by the upload handler.

    Widget-keyed session values can only be changed before the widgets are
    instantiated in the current run, so the upload handler stores the parsed
    config under PENDING_CONFIG_KEY and reruns; this function runs at the top
    of the next script run.

    Returns:
        bool: True when a pending configuration was applied.
    """
    config = st.session_state.pop(PENDING_CONFIG_KEY, None)
    if config is None:
        return False
    restore_config_to_session(config)
    return True
# End of function apply_pending_config()


def build_region_chart(summary_df):
    """
    Build a Plotly bar chart of remaining vs removed countries per region.

    Args:
        summary_df (pd.DataFrame): Output of build_region_summary.

    Returns:
        plotly.graph_objects.Figure
    """
    chart_df = summary_df.assign(removed=summary_df["total"] - summary_df["remaining"])
    chart_df = chart_df.melt(
        id_vars=["label"],
        value_vars=["remaining", "removed"],
        var_name="status",
        value_name="countries",
    )

    fig = px.bar(
        chart_df,
        x="label",
        y="countries",
        color="status",
        labels={"label": "Region", "countries": "Countries", "status": ""},
    )
    fig.update_layout(barmode="stack", xaxis_title="Region", yaxis_title="Countries")
    return fig
# End of function build_region_chart()


# ---------------------------------------------------------------------------
# Preload country data
# ---------------------------------------------------------------------------

all_codes = sorted(country_codes(), key=lambda code: resolve_display_name(code))

config_restored = apply_pending_config()


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------

st.title("Country Select")


# ---------------------------------------------------------------------------
# Sidebar — Input controls
# ---------------------------------------------------------------------------

with st.sidebar:
    st.header("Select options")

    # 1. Label mode
    labels_label = st.radio(
        "Country labels",
        options=list(LABEL_OPTIONS.keys()),
        horizontal=True,
        key="labels_input",
    )
    labels_value = LABEL_OPTIONS[labels_label]

    # 2. Extra options
    rest_of_world = st.checkbox("Rest of World option", key="rest_of_world_input")
    world_regions = st.checkbox("World region options", key="world_regions_input")

    # 3. Priority and removed countries
    priority_codes = st.multiselect(
        "Priority countries (shown first)",
        options=all_codes,
        format_func=lambda code: f"{resolve_display_name(code, labels_value)} ({code})",
        key="priority_input",
    )
    removed_codes = st.multiselect(
        "Removed countries",
        options=all_codes,
        format_func=lambda code: f"{resolve_display_name(code)} ({code})",
        key="removed_input",
    )

    # 4. Region label translations
    with st.expander("Region label translations", expanded=False):
        st.caption(
            'Upload a JSON catalog like {"locale": "pl", "labels": '
            '{"helpers.rest_of_world": "Reszta świata"}}.'
        )
        uploaded_catalog = st.file_uploader("Catalog", type=["json"], key="catalog_uploader")
        active_localize = localize
        if uploaded_catalog is not None:
            try:
                active_localize = load_localizer_json(uploaded_catalog.getvalue().decode("utf-8"))
                st.success(f"Using locale '{active_localize.locale}'.")
            except ValueError as exc:
                st.error(f"Error loading catalog: {exc}")
        # End of catalog upload handler
    # End of translations expander

    st.divider()

    # 5. Config save/load
    st.subheader("Configuration")

    config_json_str = export_config_json(
        priority_countries=priority_codes,
        removed_countries=removed_codes,
        rest_of_world=rest_of_world,
        world_regions=world_regions,
        labels=labels_value,
    )

    st.download_button(
        label="Save configuration",
        data=config_json_str,
        file_name="country_select_config.json",
        mime="application/json",
        use_container_width=True,
    )

    if config_restored:
        st.success("Configuration loaded successfully.")

    uploaded_config = st.file_uploader(
        "Load configuration",
        type=["json"],
        key="config_uploader",
    )

    if uploaded_config is not None:
        # Guard against infinite rerun loop: only process if content differs
        config_hash = hashlib.md5(uploaded_config.getvalue()).hexdigest()
        if st.session_state.get("_last_imported_config_hash") != config_hash:
            try:
                raw_json = uploaded_config.read().decode("utf-8")
                imported_config = import_config_json(raw_json)
                st.session_state[PENDING_CONFIG_KEY] = imported_config
                st.session_state["_last_imported_config_hash"] = config_hash
                st.rerun()
            except ValueError as exc:
                st.error(f"Error loading configuration: {exc}")
        # End of config-already-imported guard
    # End of config upload handler
# End of sidebar block


# ---------------------------------------------------------------------------
# Main panel — Assemble and preview
# ---------------------------------------------------------------------------

priority_pairs = [(resolve_display_name(code, labels_value), code) for code in priority_codes]

entries = build_country_options(
    selected=getattr(st.session_state.get("preview_select"), "value", None),
    priority_countries=priority_pairs,
    removed_countries=removed_codes,
    include_rest_of_world=rest_of_world,
    include_world_regions=world_regions,
    labels=labels_value,
    localize=active_localize,
)

st.subheader("Preview")

selected_entry = st.selectbox(
    "Country",
    options=entries,
    format_func=lambda entry: entry.label,
    key="preview_select",
)

if selected_entry is not None and selected_entry.disabled:
    st.warning("The separator cannot be selected.")
    selected_value = None
else:
    selected_value = selected_entry.value if selected_entry is not None else None

st.caption(f"{len(entries)} options, selected value: {selected_value!r}")

# --- Markup ---
st.subheader("Generated HTML")

markup = country_select(
    FIELD_OBJECT,
    FIELD_METHOD,
    {FIELD_METHOD: selected_value},
    priority_countries=priority_pairs,
    removed_countries=removed_codes,
    options={
        "rest_of_world": rest_of_world,
        "world_regions": world_regions,
        "labels": labels_value,
        "localize": active_localize,
    },
)
st.code(markup, language="html")

# --- Region coverage ---
st.subheader("World region coverage")

summary_df = build_region_summary(removed_codes, localize=active_localize)
st.plotly_chart(build_region_chart(summary_df), use_container_width=True)

with st.expander("Reference data notes", expanded=False):
    gaps = audit_region_membership()
    if gaps:
        gap_lines = "\n".join(f"- **{region}**: {', '.join(codes)}" for region, codes in gaps.items())
        st.markdown(f"Region members without a country entry:\n\n{gap_lines}")
    stale = find_non_iso_codes()
    if stale:
        st.markdown(f"Codes no longer in ISO 3166-1: {', '.join(stale)}")
# End of reference-notes expander

# --- Data table and downloads ---
st.subheader("Option list")
st.dataframe(build_options_dataframe(entries), use_container_width=True, hide_index=True)

dl_col1, dl_col2 = st.columns(2)

with dl_col1:
    st.download_button(
        label="Options CSV",
        data=export_options_csv(entries),
        file_name="country_options.csv",
        mime="text/csv",
        use_container_width=True,
    )
# End of dl_col1

with dl_col2:
    st.download_button(
        label="Reference table CSV",
        data=export_reference_csv(),
        file_name="countries.csv",
        mime="text/csv",
        use_container_width=True,
    )
# End of dl_col2
