"""Plot the radial, periodic and linear kernels as functions of x2 for x1 = 0

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""
import gpcov.num as gnp
import gpcov as gc
import matplotlib.pyplot as plt


def main(show=True):
    x2 = gnp.linspace(-4.0, 4.0, 400)
    x1 = 0.0

    kernels = {
        "Radial(1.0)": gc.kernel.Radial(length_scale=1.0),
        "Radial(0.5)": gc.kernel.Radial(length_scale=0.5),
        "Periodic(1.0, 2.0)": gc.kernel.Periodic(length_scale=1.0, period=2.0),
        "Linear(0.0, 0.1)": gc.kernel.Linear(offset=0.0, variance=0.1),
    }

    fig, ax = plt.subplots()
    for label, kernel in kernels.items():
        k = gnp.asarray([gc.kernel.apply(kernel, x1, float(x)) for x in x2])
        ax.plot(x2, k, label=label)

    ax.set_title("Kernels, x1 = 0")
    ax.set_xlabel("x2")
    ax.set_ylabel("k(0, x2)")
    ax.legend()
    ax.grid(True)
    if show:
        plt.show()
    plt.close(fig)


if __name__ == '__main__':
    main()
