import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st
import pandas as pd
import plotly.express as px

from atm.config import default_config, load_config
from atm.directory import AccountDirectory
from atm.errors import AccountNotFound
from atm.logging_config import setup_logging
from atm.seed import load_directory
from atm.teller import cash_breakdown, format_cash

CONFIG_PATH = os.environ.get("ATM_CONFIG", "atm.yaml")

st.set_page_config(page_title="ATM Operator", layout="wide")

config = load_config(CONFIG_PATH) if os.path.exists(CONFIG_PATH) else default_config()
setup_logging(config.log_level, config.log_format)

if "directory" not in st.session_state:
    st.session_state.directory = load_directory(config.seed_path)

directory: AccountDirectory = st.session_state.directory


def accounts_to_df(accs):
    return pd.DataFrame(
        [{"id": a.id, "name": a.name, "balance": a.balance} for a in accs],
        columns=["id", "name", "balance"],
    )


menu = st.sidebar.radio("Menu", ["🏧 Accounts", "💵 Cash Preview", "✏️ Set Balance"])

if menu == "🏧 Accounts":
    st.title("🏧 Accounts")
    df = accounts_to_df(directory)

    k1, k2 = st.columns(2)
    with k1:
        st.metric("Accounts", len(directory))
    with k2:
        st.metric("Total Balance", f"{int(df['balance'].sum()) if not df.empty else 0:,}")

    if df.empty:
        st.info("No accounts loaded.")
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
        fig_bal = px.bar(
            df,
            x="name",
            y="balance",
            labels={"name": "Account", "balance": "Balance"},
            title="Account Balances",
            template="plotly_dark",
        )
        st.plotly_chart(fig_bal, use_container_width=True)
        st.download_button("⬇ Download CSV", df.to_csv(index=False), file_name="accounts.csv")

elif menu == "💵 Cash Preview":
    st.title("💵 Cash Preview")
    amount = st.number_input("Amount", value=100, step=10)
    breakdown = cash_breakdown(int(amount))
    st.code(format_cash(breakdown))
    if breakdown.notes:
        notes = pd.Series(breakdown.notes).value_counts().sort_index(ascending=False)
        st.table(notes.rename_axis("note").reset_index(name="count"))
    else:
        st.caption("No notes dispensed for this amount.")

elif menu == "✏️ Set Balance":
    st.title("✏️ Set Balance")
    with st.form("set_balance", clear_on_submit=False):
        c1, c2 = st.columns(2)
        with c1:
            account_id = st.number_input("Account ID", value=1, step=1)
        with c2:
            new_balance = st.number_input("New balance", value=0, step=10)
        submitted = st.form_submit_button("Update")

    if submitted:
        try:
            old = directory.get_balance(int(account_id))
            directory.update_balance(int(account_id), int(new_balance))
        except AccountNotFound as e:
            st.error(f"❌ {e}")
        else:
            name = directory.get_name(int(account_id))
            st.success(f"✅ {name}: {old:,} → {int(new_balance):,}")
