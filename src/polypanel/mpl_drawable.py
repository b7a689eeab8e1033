## polyPanel framework for matplotlib-rendered drawable objects
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved
## See licensing terms here: https://github.com/rdevaul/yapCAD/blob/master/LICENSE

import logging
import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from mpl_toolkits.mplot3d.art3d import Poly3DCollection  # noqa: E402

import polypanel.drawable as drawable  # noqa: E402
from polypanel.grid import split_evenly  # noqa: E402

logger = logging.getLogger(__name__)


## one independent 3D coordinate system inside a canvas region
class mplPanel(drawable.Drawable):

    def __init__(self,ax):
        super().__init__()
        self.__ax = ax
        self.__series = []

    def __repr__(self):
        return 'an instance of mplPanel'

    @property
    def ax(self):
        return self.__ax

    @property
    def series(self):
        """polygon lists passed to ``draw_polygons``, one entry per call"""
        return self.__series

    ## chart setup

    def set_title(self,name,family='sans-serif',size_px=40):
        size_pt = size_px * 72.0 / self.__ax.figure.dpi
        self.__ax.set_title(name,fontfamily=family,fontsize=size_pt)

    def set_projection(self,pitch,yaw,scale):
        self.__ax.view_init(elev=np.degrees(pitch),azim=np.degrees(yaw))
        self.__ax.set_box_aspect((1,1,1),zoom=scale)

    def configure_axes(self,lo,hi,tick_px=10):
        tick_pt = tick_px * 72.0 / self.__ax.figure.dpi
        self.__ax.set_xlim(lo,hi)
        self.__ax.set_ylim(lo,hi)
        self.__ax.set_zlim(lo,hi)
        self.__ax.tick_params(labelsize=tick_pt)
        self.__ax.grid(True)

    ## Overload virtual polypanel.drawable base class drawing methods

    def draw_polygons(self,polygons):
        polygons = list(polygons)
        self.__series.append(polygons)
        ## empty faces stay in the series but have nothing to draw
        drawn = [p for p in polygons if len(p) > 0]
        if not drawn:
            return
        col = Poly3DCollection(drawn,
                               facecolors=self.fillcolor,
                               edgecolors=self.fillcolor,
                               linewidths=self.linewidth*0.5,
                               alpha=self.alpha)
        self.__ax.add_collection3d(col)

    def draw_polyline(self,points):
        pts = np.asarray(list(points),dtype=float)
        if len(pts) == 0:
            return
        self.__ax.plot(pts[:,0],pts[:,1],pts[:,2],
                       color=self.linecolor,
                       lw=self.linewidth)

    def draw_surface(self,xs,ys,func):
        X,Y = np.meshgrid(np.asarray(xs,dtype=float),
                          np.asarray(ys,dtype=float))
        Z = np.array([[func(x,y) for x,y in zip(xrow,yrow)]
                      for xrow,yrow in zip(X,Y)],dtype=float)
        self.__ax.plot_surface(X,Y,Z,
                               color=self.fillcolor,
                               alpha=self.alpha,
                               linewidth=0)


## the whole output image, split into panels
class mplCanvas:

    def __init__(self,size=(1920,1280),dpi=100,background='white'):
        width,height = size
        if width < 1 or height < 1 or dpi <= 0:
            raise ValueError('bad canvas size {} at dpi {}'.format(size,dpi))
        self.__size = (int(width),int(height))
        self.__dpi = dpi
        self.__background = background
        self.__fig = plt.figure(figsize=(width/dpi,height/dpi),
                                dpi=dpi,
                                facecolor=background)
        self.__filename = "polypanel-out.png"

    def __repr__(self):
        return 'an instance of mplCanvas'

    @property
    def size(self):
        return self.__size

    @property
    def dpi(self):
        return self.__dpi

    @property
    def figure(self):
        return self.__fig

    @property
    def filename(self):
        return self.__filename

    def _set_filename(self,name):
        self.__filename = name

    @filename.setter
    def filename(self,name):
        if not isinstance(name,(str,os.PathLike)):
            raise ValueError('bad (non-string) filename: '+str(name))
        self._set_filename(os.fspath(name))

    def split_evenly(self,rows,cols):
        return split_evenly(self.__size[0],self.__size[1],rows,cols)

    def panel(self,region,margin=0):
        rect = region.to_figure_rect(self.__size[0],self.__size[1],margin)
        ax = self.__fig.add_axes(rect,projection='3d')
        return mplPanel(ax)

    ## write the canvas to ``filename``
    def display(self):
        directory = os.path.dirname(self.__filename)
        if directory:
            os.makedirs(directory,exist_ok=True)
        self.__fig.savefig(self.__filename,
                           dpi=self.__dpi,
                           facecolor=self.__background)
        logger.info('wrote %s (%dx%d)',self.__filename,*self.__size)
        return self.__filename

    def close(self):
        plt.close(self.__fig)
