# app.py
import logging

import streamlit as st
import folium
from streamlit_folium import st_folium
from geopy.distance import geodesic

from curve_utils import QuadraticBezierLine, DEFAULT_OPTIONS, add_quadratic_bezier_to_map, polyline_length_m

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Set page config first
st.set_page_config(layout="wide")


def read_curve_options():
    """Read the curve options from the sidebar"""
    st.sidebar.subheader("Endpoints")
    from_lat = st.sidebar.number_input("From latitude", value=32.9740081, format="%.7f")
    from_lng = st.sidebar.number_input("From longitude", value=-117.2669915, format="%.7f")
    to_lat = st.sidebar.number_input("To latitude", value=32.9536000, format="%.7f")
    to_lng = st.sidebar.number_input("To longitude", value=-117.2430000, format="%.7f")

    st.sidebar.subheader("Curve")
    curve_factor = st.sidebar.slider("Curve factor", min_value=-1.0, max_value=1.0,
                                     value=float(DEFAULT_OPTIONS["curve_factor"]), step=0.05)
    steps = st.sidebar.number_input("Steps", min_value=0, max_value=500,
                                    value=DEFAULT_OPTIONS["steps"], step=1)

    control_point = None
    if st.sidebar.checkbox("Explicit control point", value=False):
        control_lat = st.sidebar.number_input("Control latitude", value=(from_lat + to_lat) / 2, format="%.7f")
        control_lng = st.sidebar.number_input("Control longitude", value=(from_lng + to_lng) / 2, format="%.7f")
        control_point = (control_lat, control_lng)

    st.sidebar.subheader("Style")
    color = st.sidebar.color_picker("Color", value=DEFAULT_OPTIONS["color"])
    weight = st.sidebar.slider("Weight", min_value=1, max_value=15, value=DEFAULT_OPTIONS["weight"])
    opacity = st.sidebar.slider("Opacity", min_value=0.0, max_value=1.0,
                                value=DEFAULT_OPTIONS["opacity"], step=0.05)

    opts = {
        "color": color,
        "opacity": opacity,
        "weight": weight,
        "steps": int(steps),
        "control_point": control_point,
        "curve_factor": curve_factor,
    }
    return (from_lat, from_lng), (to_lat, to_lng), opts


def main():
    st.title("Quadratic Bezier Line")

    from_point, to_point, opts = read_curve_options()

    st.sidebar.subheader("Display")
    add_markers = st.sidebar.checkbox("Show start/middle/end markers", value=True)
    show_control_point = st.sidebar.checkbox("Show control point", value=True)

    try:
        curve = QuadraticBezierLine(from_point, to_point, opts)
    except ValueError as e:
        st.sidebar.error(f"Invalid curve options: {e}")
        return

    # Center the map between the two endpoints
    center = ((from_point[0] + to_point[0]) / 2, (from_point[1] + to_point[1]) / 2)
    m = folium.Map(location=center, zoom_start=13, tiles="OpenStreetMap")

    add_quadratic_bezier_to_map(
        m,
        curve,
        tooltip=f"Bezier line ({len(curve.get_points())} points)",
        add_markers=add_markers,
        show_control_point=show_control_point
    )

    # Fit the view to the curve and its control point
    lats = [p.lat for p in curve.get_points()] + [curve.control.lat]
    lngs = [p.lng for p in curve.get_points()] + [curve.control.lng]
    m.fit_bounds([(min(lats), min(lngs)), (max(lats), max(lngs))])

    st_folium(m, width="100%", height=600)

    st.subheader("Line Details")
    try:
        straight_m = geodesic(from_point, to_point).meters
        curve_m = polyline_length_m(curve.get_points())
    except ValueError as e:
        st.error(f"Could not measure the line: {e}")
        return

    col1, col2, col3 = st.columns(3)
    col1.metric("Points", len(curve.get_points()))
    col2.metric("Curve length", f"{curve_m:,.1f} m")
    col3.metric("Straight distance", f"{straight_m:,.1f} m")

    st.write(f"**Control point:** ({curve.control.lat:.7f}, {curve.control.lng:.7f})")
    st.write(f"**Midpoint:** ({curve.get_midpoint().lat:.7f}, {curve.get_midpoint().lng:.7f})")


if __name__ == "__main__":
    main()
