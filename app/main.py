"""
Streamlit Frontend for Finance Tracker

The user interface for recording income and expenses and looking
at the ledger.

DESIGN PRINCIPLES:
1. The UI only collects input and renders results
2. All rules live in the finance_tracker package
3. Clear error messages for every rejected action
4. Nothing is written to disk without an explicit "Save" action
"""

from datetime import date

import streamlit as st

from finance_tracker.audit import configure_logging
from finance_tracker.config import get_settings
from finance_tracker.models.transaction import TransactionKind
from finance_tracker.presentation import summary_lines, transaction_rows
from finance_tracker.queries import (
    filter_by_category,
    filter_by_date_range,
    group_totals_by_category,
    summarize,
)
from finance_tracker.services.storage import StorageError
from finance_tracker.store import TransactionStore, create_store
from finance_tracker.validation import ValidationError, get_user_friendly_summary


# Page configuration
st.set_page_config(
    page_title="Personal Finance Tracker",
    page_icon="💰",
    layout="wide",
)


@st.cache_resource
def get_store() -> TransactionStore:
    """Create the store once per server process and load the data file."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)

    store = create_store(settings)
    try:
        report = store.load()
    except StorageError as e:
        st.error(str(e))
        return store

    if not report.source_found:
        st.info("No data file found. Starting with an empty tracker.")
    elif report.skipped_count:
        st.warning(
            f"Loaded {report.loaded} transactions. "
            f"Skipped {report.skipped_count} malformed lines."
        )
    return store


def main():
    """Main application entry point."""
    store = get_store()
    settings = get_settings()

    st.title("💰 Personal Finance Tracker")

    if "view" not in st.session_state:
        st.session_state.view = "all"  # all, category, date_range

    render_add_form(store)
    st.markdown("---")

    col_table, col_side = st.columns([3, 1])
    with col_side:
        render_filters()
        render_save_button(store)
    with col_table:
        render_table(store)

    st.markdown("---")
    render_summary(store, settings.currency_symbol)
    render_history(store)


def render_add_form(store: TransactionStore):
    """Render the add-transaction form."""
    with st.form("add_transaction", clear_on_submit=True):
        col1, col2, col3 = st.columns(3)
        with col1:
            description = st.text_input("Description:")
            amount = st.text_input("Amount:")
        with col2:
            kind = st.selectbox(
                "Type:",
                [k.value for k in TransactionKind],
            )
            category = st.text_input("Category:")
        with col3:
            transaction_date = st.text_input(
                "Date (YYYY-MM-DD):",
                value=date.today().isoformat(),
            )

        submitted = st.form_submit_button("Add Transaction", type="primary")

    if submitted:
        try:
            store.add(
                description=description,
                amount=amount,
                kind=kind,
                category=category,
                date=transaction_date,
            )
        except ValidationError as e:
            st.error(get_user_friendly_summary(e.issues))


def render_filters():
    """Render category / date range filters and the clear button."""
    st.subheader("Filters")

    category = st.text_input("Category to filter by:")
    if st.button("Filter by Category"):
        if category.strip():
            st.session_state.view = "category"
            st.session_state.category_filter = category

    start = st.date_input("Start Date:", value=date.today())
    end = st.date_input("End Date:", value=date.today())
    if st.button("Filter by Date Range"):
        st.session_state.view = "date_range"
        st.session_state.date_range = (start, end)

    if st.button("Clear Filters"):
        st.session_state.view = "all"


def render_save_button(store: TransactionStore):
    """Render the save action."""
    if st.button("💾 Save", type="primary"):
        try:
            store.save()
            st.success("Transactions saved successfully!")
        except StorageError as e:
            st.error(f"Error saving transactions to file: {e}")


def render_table(store: TransactionStore):
    """Render the (possibly filtered) transaction table."""
    transactions = store.list()

    if st.session_state.view == "category":
        transactions = filter_by_category(
            transactions, st.session_state.category_filter
        )
    elif st.session_state.view == "date_range":
        start, end = st.session_state.date_range
        transactions = filter_by_date_range(transactions, start, end)

    if not transactions:
        st.info("No transactions to show.")
        return

    st.dataframe(transaction_rows(transactions), use_container_width=True)


def render_summary(store: TransactionStore, currency_symbol: str):
    """Render the financial summary and the spending breakdown."""
    st.subheader("📊 Financial Summary")
    transactions = store.list()

    for line in summary_lines(summarize(transactions), currency_symbol):
        st.markdown(f"- {line}")

    breakdown = group_totals_by_category(transactions, TransactionKind.EXPENSE)
    if breakdown:
        st.bar_chart(
            [{"Category": name, "Total": float(total)} for name, total in breakdown.items()],
            x="Category",
            y="Total",
        )


def render_history(store: TransactionStore):
    """Render this session's audit trail."""
    if not store.audit_logger:
        return

    with st.expander("🕒 Session history"):
        for event in reversed(store.audit_logger.events):
            st.markdown(
                f"`{event.timestamp:%H:%M:%S}` {event.description}"
            )


if __name__ == "__main__":
    main()