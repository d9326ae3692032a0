"""
Build covariance matrices of a 1D training set and display them

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpcov.num as gnp
import gpcov as gc
import matplotlib.pyplot as plt


def generate_data():
    """
    Data generation.

    Returns
    -------
    tuple
        (xi, zi): training inputs and targets
    """
    ni = 20
    xi = gnp.linspace(0.0, 4.0, ni)
    zi = gnp.sin(2.0 * gnp.pi * xi / 2.0) + 0.5 * xi
    return xi, zi


def build_models(xi, zi):
    kernels = [
        gc.kernel.Radial(length_scale=0.5),
        gc.kernel.Periodic(length_scale=1.0, period=2.0),
        gc.kernel.Linear(offset=2.0, variance=0.1),
    ]
    model = gc.GaussianProcess(xi, kernels[0], y_train=zi)
    # same training set, the matrix is rebuilt for each kernel
    return [model] + [model.with_kernel(k) for k in kernels[1:]]


def visualize_results(models):
    fig, axes = plt.subplots(1, len(models), figsize=(4 * len(models), 4))
    for ax, model in zip(axes, models):
        im = ax.imshow(model.covariance_matrix, cmap="viridis")
        ax.set_title(type(model.kernel).__name__)
        fig.colorbar(im, ax=ax, fraction=0.046)
    return fig


def main(show=True):
    xi, zi = generate_data()
    models = build_models(xi, zi)

    for model in models:
        print(model)
        d = model.diagnostics()
        print(f"  min eigenvalue: {d.min_eigenvalue:.3e}")

    fig = visualize_results(models)
    if show:
        plt.show()
    plt.close(fig)


if __name__ == '__main__':
    main()
