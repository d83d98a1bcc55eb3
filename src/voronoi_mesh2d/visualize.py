import matplotlib.pyplot as plt


def plot_voronoi_mesh(mesh, ax=None, *, show_seeds=True, show_regions=False):
    if ax is None:
        fig, ax = plt.subplots()

    for e in mesh.edges():
        p = mesh.get_vertex(e.left)
        q = mesh.get_vertex(e.right)
        ax.plot([p[0], q[0]], [p[1], q[1]], "-k")

    if show_regions:
        for i in range(mesh.number_of_seeds):
            poly = mesh.region_polygon(i)
            if len(poly):
                loop = list(poly) + [poly[0]]
                ax.plot([p[0] for p in loop], [p[1] for p in loop], "-", color="tab:blue", lw=0.8)

    if show_seeds:
        for s in mesh.seeds():
            ax.plot(s[0], s[1], ".r")

    ax.set_aspect("equal")
    ax.set_title("VoronoiMesh2D")
    return ax
