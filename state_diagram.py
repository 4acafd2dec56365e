from graphviz import Digraph

from utils import Bearing, rotate_left, rotate_right

def build_state_diagram():
    """Robot automaton: one state per bearing plus the terminal LOST state"""
    dot = Digraph("Robot_State_Diagram", format="png")
    dot.attr(rankdir="LR", size="8,5")

    # Places (circles)
    for bearing in Bearing:
        dot.node(bearing.name, bearing.name, shape="circle")
    dot.node("LOST", "LOST", shape="doublecircle", style="filled", color="lightgray")

    # Turns never change the cell, only the bearing
    for bearing in Bearing:
        dot.edge(bearing.name, rotate_left(bearing).name, label="L")
        dot.edge(bearing.name, rotate_right(bearing).name, label="R")

    # Exceptional cases
    for bearing in Bearing:
        dot.edge(bearing.name, bearing.name, label="F")
        dot.edge(bearing.name, bearing.name, label="F (scent)", style="dashed")
        dot.edge(bearing.name, "LOST", label="F off edge")

    return dot

def main():
    dot = build_state_diagram()
    dot.render("robot_state_diagram", view=False)
    print("Robot state diagram saved to robot_state_diagram.png")

if __name__ == "__main__":
    main()
