"""
Streamlit web interface for the distribution functions.

Interactive UI with tabs for:
- Density and CDF plots
- Quantile calculator
- Consistency diagnostics
"""

import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from distrs import Normal, StudentsT
from distrs.diagnostics.consistency import bind_distribution, run_all_checks

st.set_page_config(page_title="Distribution Explorer", layout="wide")

st.title("Distribution Explorer")
st.markdown("Normal and Student's t density, CDF and quantile functions")

# Sidebar parameters
st.sidebar.header("Distribution")
dist = st.sidebar.selectbox("Distribution", ["normal", "t"], format_func=lambda d: "Normal" if d == "normal" else "Student's t")
if dist == "normal":
    mean = st.sidebar.number_input("Mean", value=0.0)
    std_dev = st.sidebar.number_input("Standard Deviation", value=1.0, min_value=0.001)
    df = None
    center, scale = mean, std_dev
else:
    mean, std_dev = 0.0, 1.0
    df = st.sidebar.number_input("Degrees of Freedom", value=5.0, min_value=0.01)
    center, scale = 0.0, 1.0

pdf, cdf, ppf, _ = bind_distribution(dist, mean, std_dev, df)

# Main tabs
tab1, tab2, tab3 = st.tabs(["Density & CDF", "Quantiles", "Diagnostics"])

with tab1:
    st.header("Density and Cumulative Distribution")

    x_range = np.linspace(center - 6 * scale, center + 6 * scale, 241)
    # Functions are scalar; evaluate elementwise
    pdf_values = [pdf(float(x)) for x in x_range]
    cdf_values = [cdf(float(x)) for x in x_range]

    fig_pdf = go.Figure()
    fig_pdf.add_trace(go.Scatter(x=x_range, y=pdf_values, name="PDF"))
    if dist == "t":
        normal_values = [Normal.pdf(float(x), 0.0, 1.0) for x in x_range]
        fig_pdf.add_trace(go.Scatter(x=x_range, y=normal_values, name="Standard normal", line=dict(dash="dot")))
    fig_pdf.update_layout(title="Probability Density", xaxis_title="x", yaxis_title="f(x)")
    st.plotly_chart(fig_pdf, use_container_width=True)

    fig_cdf = go.Figure()
    fig_cdf.add_trace(go.Scatter(x=x_range, y=cdf_values, name="CDF", line=dict(color="orange")))
    fig_cdf.update_layout(title="Cumulative Distribution", xaxis_title="x", yaxis_title="F(x)")
    st.plotly_chart(fig_cdf, use_container_width=True)

with tab2:
    st.header("Quantile Calculator")

    p = st.number_input("Probability", value=0.975, min_value=0.0, max_value=1.0, format="%.6f")
    x_value = ppf(p)
    st.metric(label="Quantile", value=f"{x_value:.8g}")

    levels = [0.001, 0.01, 0.025, 0.05, 0.1, 0.5, 0.9, 0.95, 0.975, 0.99, 0.999]
    quantile_df = pd.DataFrame({
        "Probability": levels,
        "Quantile": [ppf(level) for level in levels],
        "Normal Quantile": [Normal.ppf(level, mean, std_dev) for level in levels],
    })
    st.table(quantile_df)

    if dist == "t":
        st.caption(f"P(T <= 1) = {StudentsT.cdf(1.0, df):.10f}")

with tab3:
    st.header("Consistency Diagnostics")

    if st.button("Run Diagnostics"):
        checks = run_all_checks(dist, mean=mean, std_dev=std_dev, df=df)

        diagnostics_df = pd.DataFrame({
            "Check": list(checks.keys()),
            "Valid": [result.is_valid for result in checks.values()],
            "Details": [
                ", ".join(f"{key}={value:.3e}" for key, value in result.details.items())
                for result in checks.values()
            ],
        })
        st.table(diagnostics_df)

        for name, result in checks.items():
            for message in result.violations:
                st.error(f"{name}: {message}")
        if all(result.is_valid for result in checks.values()):
            st.success("All checks passed")
