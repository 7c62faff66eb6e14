from __future__ import annotations

from typing import Dict

import plotly.graph_objects as go

from kepler_orbit.physics.orbit import Orbit, orbit_track


def build_orbit_figure(
    orbits: Dict[str, Orbit],
    n_samples: int = 360,
    show_periapsis: bool = True,
) -> go.Figure:
    """
    Builds a static 3D scene:
      - Central body marker at the origin (focus)
      - Orbit track for each orbit
      - Periapsis marker (M = 0) for each orbit
    The figure is returned, not written anywhere.
    """
    if not orbits:
        raise ValueError("No orbits to plot.")

    fig = go.Figure()

    fig.add_trace(go.Scatter3d(
        x=[0.0], y=[0.0], z=[0.0],
        mode="markers",
        name="focus",
        marker=dict(size=4),
    ))

    for orbit_id, orbit in orbits.items():
        track = orbit_track(orbit, n_samples)
        xs = [r[0] for r in track]
        ys = [r[1] for r in track]
        zs = [r[2] for r in track]

        fig.add_trace(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode="lines",
            name=f"{orbit_id} track",
        ))

        if show_periapsis:
            px, py, pz = orbit.position(0.0)
            fig.add_trace(go.Scatter3d(
                x=[px], y=[py], z=[pz],
                mode="markers",
                name=f"{orbit_id} periapsis",
                marker=dict(size=5),
            ))

    fig.update_layout(
        title="Keplerian Orbits",
        scene=dict(
            xaxis_title="X",
            yaxis_title="Y",
            zaxis_title="Z",
            aspectmode="data",
        ),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )
    return fig
