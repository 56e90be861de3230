from __future__ import annotations

import streamlit as st

from core.config import CFG
from infrastructure.http.dataset_client import fetch_dataset_csv
from use_cases.load_dataset import LoadDatasetInput, LoadDatasetOutput, load_dataset_uc


@st.cache_data(ttl=CFG.cache_ttl_seconds, show_spinner=False)
def cached_dataset_csv(url: str, timeout: float) -> str:
    return fetch_dataset_csv(url, timeout=timeout)


def get_dataset() -> LoadDatasetOutput:
    # мережа лише один раз на TTL, решта перераховується на кожен rerun
    text = cached_dataset_csv(CFG.dataset_url, CFG.http_timeout)
    return load_dataset_uc(CFG, LoadDatasetInput(csv_text=text))
