from lonelyedges.viz.draw import draw_blow_up, draw_lonely_edges

g6 = "C~"  # K4

print("lonely edges:", draw_lonely_edges(g6))
print("(parent, child) lonely counts:", draw_blow_up(g6, 0))
