"""
Web application for Differential Drivetrain Gearing Analysis

Interactive dashboard to compare open-loop runs of the kitbot drivetrain at
different gear ratios.
"""

import logging
from typing import Any, Dict, List

import dash
from dash import dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate
import numpy as np
import plotly.express as px
import plotly.graph_objs as go

from drivetrain import State as StateIndex
from drivetrain import run_gearing_analysis

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger("drivetrain_app")

INPUT_STYLE = {'width': '100%', 'padding': '8px'}
LABEL_STYLE = {'fontWeight': 'bold', 'marginBottom': '5px'}


def labelled_input(label: str, component: Any, width: str) -> html.Div:
    return html.Div([
        html.Label(label, style=LABEL_STYLE),
        component,
    ], style={'width': width, 'display': 'inline-block', 'marginRight': '20px'})


# Initialize Dash app
app = dash.Dash(__name__)
app.title = "Differential Drivetrain Gearing Analysis"

# Define app layout
app.layout = html.Div([
    html.Div([
        html.H1("Differential Drivetrain Gearing Analysis",
                style={'textAlign': 'center', 'marginBottom': '30px'}),

        html.Div([
            labelled_input(
                "Gear Ratios (comma-separated):",
                dcc.Input(id='gearing-input', type='text', value='5.95,8.45,10.71,12.75',
                          style=INPUT_STYLE),
                '25%',
            ),
            labelled_input(
                "Left Voltage (V):",
                dcc.Input(id='left-voltage-input', type='number', value=12.0,
                          min=-12.0, max=12.0, step=0.5, style=INPUT_STYLE),
                '12%',
            ),
            labelled_input(
                "Right Voltage (V):",
                dcc.Input(id='right-voltage-input', type='number', value=12.0,
                          min=-12.0, max=12.0, step=0.5, style=INPUT_STYLE),
                '12%',
            ),
            labelled_input(
                "Simulation Duration (s):",
                dcc.Input(id='duration-input', type='number', value=5.0,
                          min=0.5, max=60.0, step=0.5, style=INPUT_STYLE),
                '15%',
            ),

            html.Button('Run Simulation', id='run-button',
                        style={'width': '20%', 'padding': '10px', 'fontSize': '16px',
                               'backgroundColor': '#4CAF50', 'color': 'white',
                               'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'})
        ], style={'marginBottom': '30px', 'padding': '20px', 'backgroundColor': '#f5f5f5',
                  'borderRadius': '10px'}),

        html.Div(id='status-message', style={'marginBottom': '20px', 'fontSize': '14px'}),

        dcc.Loading(
            id="loading",
            type="default",
            children=[
                html.Div(id='results-container')
            ]
        )
    ], style={'maxWidth': '1400px', 'margin': '0 auto', 'padding': '20px'})
])


@app.callback(
    [Output("results-container", "children"), Output("status-message", "children")],
    [Input("run-button", "n_clicks")],
    [
        State("gearing-input", "value"),
        State("left-voltage-input", "value"),
        State("right-voltage-input", "value"),
        State("duration-input", "value"),
    ],
)
def update_results(
    n_clicks: int | None,
    gearing_str: str,
    left_voltage: float,
    right_voltage: float,
    duration: float,
) -> tuple[Any, Any]:
    """Run simulation and update results"""
    if n_clicks is None:
        raise PreventUpdate

    # Cleared or out-of-range Dash inputs arrive as None
    missing = [
        name for name, value in (
            ("gear ratios", gearing_str),
            ("left voltage", left_voltage),
            ("right voltage", right_voltage),
            ("duration", duration),
        )
        if value is None or value == ""
    ]
    if missing:
        return [], html.Div(
            f"Error: Missing or out-of-range value for {', '.join(missing)}.",
            style={"color": "red"},
        )

    try:
        gear_ratios = sorted(float(s.strip()) for s in gearing_str.split(","))

        # Validate inputs
        if any(ratio <= 0 for ratio in gear_ratios):
            return [], html.Div(
                "Error: Gear ratios must be positive.",
                style={"color": "red"},
            )

        if duration <= 0 or duration > 60:
            return [], html.Div(
                "Error: Duration must be between 0 and 60 seconds.",
                style={"color": "red"},
            )

        results = run_gearing_analysis(
            gear_ratios,
            left_voltage=left_voltage,
            right_voltage=right_voltage,
            duration=duration,
        )

        status_msg = html.Div(
            f"Simulation complete! Compared {len(gear_ratios)} gear ratios.",
            style={"color": "green"},
        )

        return create_results_layout(results, gear_ratios), status_msg

    except ValueError as e:
        logger.error(f"Simulation request rejected: {e}")
        return [], html.Div(f"Error: {e}", style={"color": "red"})


def time_series_figure(
    results: Dict[float, Dict[str, Any]],
    gear_ratios: List[float],
    title: str,
    yaxis_title: str,
    extract: Any,
) -> go.Figure:
    """Line plot of one quantity over time, one trace per gear ratio"""
    fig = go.Figure()
    colors = px.colors.qualitative.Set1
    for i, ratio in enumerate(gear_ratios):
        fig.add_trace(
            go.Scatter(
                x=results[ratio]["time"],
                y=extract(results[ratio]),
                mode="lines",
                name=f"{ratio}:1",
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"Gearing: {ratio}:1<br>Time: %{{x:.2f}}s<br>%{{y:.2f}}<extra></extra>",
            )
        )

    fig.update_layout(
        title=title,
        xaxis_title="Time (s)",
        yaxis_title=yaxis_title,
        hovermode="closest",
        height=400,
        template="plotly_white",
    )
    return fig


def create_results_layout(
    results: Dict[float, Dict[str, Any]], gear_ratios: List[float]
) -> html.Div:
    """Create the results visualization layout"""
    colors = px.colors.qualitative.Set1

    # 1. Path on the field
    fig1 = go.Figure()
    for i, ratio in enumerate(gear_ratios):
        state = results[ratio]["state"]
        fig1.add_trace(
            go.Scatter(
                x=state[:, StateIndex.X],
                y=state[:, StateIndex.Y],
                mode="lines",
                name=f"{ratio}:1",
                line=dict(color=colors[i % len(colors)], width=2),
                hovertemplate=f"Gearing: {ratio}:1<br>x: %{{x:.2f}}m<br>y: %{{y:.2f}}m<extra></extra>",
            )
        )

    fig1.update_layout(
        title="Path on Field",
        xaxis_title="x (m)",
        yaxis_title="y (m)",
        yaxis=dict(scaleanchor="x", scaleratio=1),
        hovermode="closest",
        height=500,
        template="plotly_white",
    )

    # 2. Linear speed over time
    fig2 = time_series_figure(
        results, gear_ratios, "Linear Speed Over Time", "Speed (m/s)",
        lambda run: (run["state"][:, StateIndex.LEFT_VELOCITY]
                     + run["state"][:, StateIndex.RIGHT_VELOCITY]) / 2,
    )

    # 3. Heading over time
    fig3 = time_series_figure(
        results, gear_ratios, "Heading Over Time", "Heading (degrees)",
        lambda run: run["state"][:, StateIndex.HEADING] * 180 / np.pi,
    )

    # 4. Current draw over time
    fig4 = time_series_figure(
        results, gear_ratios, "Current Draw Over Time", "Current (A)",
        lambda run: run["current"],
    )

    # 5. Top speed and peak current bar charts
    ratio_labels = [f"{ratio}:1" for ratio in gear_ratios]
    max_speeds = [results[r]["analysis"]["max_speed"] for r in gear_ratios]
    peak_currents = [results[r]["analysis"]["peak_current"] for r in gear_ratios]

    fig5 = go.Figure()
    fig5.add_trace(
        go.Bar(
            x=ratio_labels,
            y=max_speeds,
            marker_color="green",
            text=[f"{s:.2f} m/s" for s in max_speeds],
            textposition="outside",
            hovertemplate="Gearing: %{x}<br>Max Speed: %{y:.2f} m/s<extra></extra>",
        )
    )
    fig5.update_layout(
        title="Maximum Speed by Gear Ratio",
        xaxis_title="Gear Ratio",
        yaxis_title="Max Speed (m/s)",
        height=400,
        template="plotly_white",
    )

    fig6 = go.Figure()
    fig6.add_trace(
        go.Bar(
            x=ratio_labels,
            y=peak_currents,
            marker_color="orange",
            text=[f"{c:.0f} A" for c in peak_currents],
            textposition="outside",
            hovertemplate="Gearing: %{x}<br>Peak Current: %{y:.1f} A<extra></extra>",
        )
    )
    fig6.update_layout(
        title="Peak Current by Gear Ratio",
        xaxis_title="Gear Ratio",
        yaxis_title="Peak Current (A)",
        height=400,
        template="plotly_white",
    )

    # Summary table
    table_rows = [
        html.Tr([
            html.Th("Gear Ratio"),
            html.Th("Max Speed (m/s)"),
            html.Th("Path Length (m)"),
            html.Th("Heading Change (deg)"),
            html.Th("Peak Current (A)"),
            html.Th("Charge Used (mAh)"),
        ])
    ]

    for ratio in gear_ratios:
        analysis = results[ratio]["analysis"]
        table_rows.append(
            html.Tr([
                html.Td(f"{ratio}:1"),
                html.Td(f"{analysis['max_speed']:.2f}"),
                html.Td(f"{analysis['path_length']:.2f}"),
                html.Td(f"{np.degrees(analysis['heading_change']):.1f}"),
                html.Td(f"{analysis['peak_current']:.1f}"),
                html.Td(f"{analysis['charge_amp_hours'] * 1000:.1f}"),
            ])
        )

    return html.Div([
        html.H2("Simulation Results", style={"marginTop": "30px", "marginBottom": "20px"}),
        html.Div([
            html.H3("Summary Table", style={"marginBottom": "15px"}),
            html.Table(
                table_rows,
                style={
                    "width": "100%",
                    "borderCollapse": "collapse",
                    "marginBottom": "30px",
                    "fontSize": "14px",
                },
            ),
        ], style={"marginBottom": "30px"}),
        html.Div([
            html.Div([dcc.Graph(figure=fig1)], style={"marginBottom": "30px"}),
            html.Div([dcc.Graph(figure=fig2)], style={"marginBottom": "30px"}),
            html.Div([dcc.Graph(figure=fig3)], style={"marginBottom": "30px"}),
            html.Div([dcc.Graph(figure=fig4)], style={"marginBottom": "30px"}),
            html.Div([
                html.Div(
                    [dcc.Graph(figure=fig5)],
                    style={"width": "48%", "display": "inline-block", "marginRight": "2%"},
                ),
                html.Div(
                    [dcc.Graph(figure=fig6)],
                    style={"width": "48%", "display": "inline-block"},
                ),
            ], style={"marginBottom": "30px"}),
        ]),
    ])


if __name__ == "__main__":
    app.run(debug=True, port=8050)
