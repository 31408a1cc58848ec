import numpy


def plot_error_history(errors, ax=None, log_scale=True, **kwargs):
    """ Plot the per-epoch errors returned by `Network.train`

    Parameters
    ----------
    errors: ndarray, shape=(n_epochs,)
        The epoch errors

    ax: matplotlib axis, default=None
        The axis to plot onto. The default (None) creates a new figure.

    log_scale: bool, default=True
        If True, the error axis is log scaled

    kwargs:
        Supplied to the `plot` function

    Returns
    -------
    ax: matplotlib axis
    """
    import matplotlib.pyplot as plt

    errors = numpy.asarray(errors)

    if errors.ndim != 1:
        msg = "`errors` should be 1d but has {} dimensions"
        raise ValueError(msg.format(errors.ndim))

    if ax is None:
        _, ax = plt.subplots(1, 1)

    ax.plot(numpy.arange(errors.shape[0]), errors, **kwargs)

    if log_scale and (errors > 0).all() and errors.shape[0] > 0:
        ax.set_yscale('log')

    ax.set_xlabel('Epoch')
    ax.set_ylabel('Error')

    return ax
