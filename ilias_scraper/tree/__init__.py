"""Tree nodes for printing, comparing and downloading course trees."""