# streamlit_app/app.py

import logging

import streamlit as st

from bookcatalog.core.config import settings
from bookcatalog.crud import BookRepository
from bookcatalog.db.init_db import create_tables, init_db
from bookcatalog.db.session import SessionLocal, engine, session_scope
from bookcatalog.ui.shell import delete_book, find_book

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@st.cache_resource
def bootstrap_database() -> bool:
    """Creates missing tables and seeds the authors once per server process."""
    create_tables(engine)
    with session_scope(SessionLocal) as db:
        return init_db(db)


bootstrap_database()
repo = BookRepository(SessionLocal)

if "output_text" not in st.session_state:
    st.session_state.output_text = ""

st.title("Book Catalog")

book_id_text = st.text_input("Book ID", key="book_id_input")

find_col, delete_col = st.columns(2)
with find_col:
    if st.button("Find"):
        logger.info(f"Find requested for '{book_id_text}'")
        st.session_state.output_text = find_book(repo, book_id_text)
with delete_col:
    if st.button("Delete"):
        logger.info(f"Delete requested for '{book_id_text}'")
        st.session_state.output_text = delete_book(repo, book_id_text)

st.text(st.session_state.output_text)
