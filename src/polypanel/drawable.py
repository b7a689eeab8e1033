## base class of drawable for polyPanel
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved
## See licensing terms here: https://github.com/rdevaul/yapCAD/blob/master/LICENSE

from matplotlib.colors import is_color_like

## Generic 3D drawing functions -- assumed to use the panel's own
## coordinate system and the current pen (fill color, alpha, etc.)

class Drawable:
    """Base class for polyPanel drawables"""

    ## pure virtual functions -- override for specific rendering
    ## system
    def draw_polygons(self,polygons):
        raise NotImplementedError('pure virtual draw_polygons called: {} polygons'.format(len(polygons)))

    def draw_polyline(self,points):
        raise NotImplementedError('pure virtual draw_polyline called: {} points'.format(len(points)))

    def draw_surface(self,xs,ys,func):
        raise NotImplementedError('pure virtual draw_surface called')

    ## non-virtual utility drawing functions

    ## draw a 2D grid of sample points (list of rows) as one series
    ## of quads, each quad spanning neighbouring rows and columns
    def draw_grid_quads(self,grid):
        quads = []
        for i in range(len(grid)-1):
            row = grid[i]
            nxt = grid[i+1]
            for j in range(min(len(row),len(nxt))-1):
                quads.append([row[j],nxt[j],nxt[j+1],row[j+1]])
        self.draw_polygons(quads)
        return quads

    def __init__(self):
        self.__linecolor = 'red'
        self.__fillcolor = 'blue'
        self.__alpha = 0.3
        self.__linewidth = 1.0

    ## Various property functions

    @property
    def alpha(self):
        return self.__alpha

    def _set_alpha(self,a):
        self.__alpha = a

    @alpha.setter
    def alpha(self,a):
        if isinstance(a,bool) or not isinstance(a,(int,float)) or a < 0.0 or a > 1.0:
            raise ValueError('bad alpha ' + str(a))
        self._set_alpha(float(a))

    @property
    def linewidth(self):
        return self.__linewidth

    def _set_linewidth(self,lw):
        self.__linewidth=lw

    @linewidth.setter
    def linewidth(self,lw):
        if isinstance(lw,bool) or not isinstance(lw,(int,float)) or lw <= 0:
            raise ValueError('invalid linewidth ' + str(lw))
        self._set_linewidth(lw)

    ## line color
    @property
    def linecolor(self):
        return self.__linecolor

    def _set_linecolor(self,c):
        self.__linecolor=c

    @linecolor.setter
    def linecolor(self,c):
        if is_color_like(c):
            self._set_linecolor(c)
        else:
            raise ValueError('bad linecolor ' + str(c))

    ## fill color
    @property
    def fillcolor(self):
        return self.__fillcolor

    def _set_fillcolor(self,c):
        self.__fillcolor = c

    @fillcolor.setter
    def fillcolor(self,c):
        if is_color_like(c):
            self._set_fillcolor(c)
        else:
            raise ValueError('bad fillcolor ' + str(c))

    ## non-property methods

    def __repr__(self):
        return 'an abstract Drawable instance'
