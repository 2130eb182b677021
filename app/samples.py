SAMPLE_RECIPES = [
    """Classic Chocolate Chip Cookies
2 1/4 cups all-purpose flour
1 cup butter, softened
3/4 cup granulated sugar
3/4 cup packed brown sugar
1 teaspoon vanilla extract
2 large eggs
2 cups semi-sweet chocolate chips
1 teaspoon baking soda
1/2 teaspoon salt

Preheat oven to 375°F
Cream together butter and sugars
Beat in eggs and vanilla
Mix in dry ingredients
Stir in chocolate chips
Drop by rounded tablespoons onto ungreased baking sheets
Bake 9 to 11 minutes until golden brown""",
    """Oatmeal Raisin Cookies
1 1/2 cups all-purpose flour
1 cup butter, softened
3/4 cup brown sugar
1/2 cup white sugar
2 eggs
1 teaspoon vanilla extract
2 1/2 cups old-fashioned oats
1 cup raisins
1 teaspoon baking soda
1 teaspoon ground cinnamon
1/2 teaspoon salt

Preheat oven to 350°F
Cream butter and sugars until smooth
Beat in eggs and vanilla
Mix in flour, baking soda, cinnamon, and salt
Stir in oats and raisins
Drop rounded tablespoons onto baking sheets
Bake 10-12 minutes until golden brown""",
    """Snickerdoodle Cookies
2 3/4 cups all-purpose flour
1 cup butter, softened
1 1/2 cups sugar
2 eggs
2 teaspoons cream of tartar
1 teaspoon baking soda
1/4 teaspoon salt
2 tablespoons sugar (for rolling)
2 teaspoons ground cinnamon (for rolling)

Preheat oven to 375°F
Cream butter and sugar until light and fluffy
Beat in eggs one at a time
Mix in flour, cream of tartar, baking soda, and salt
Shape dough into 1-inch balls
Roll in cinnamon-sugar mixture
Bake 10-12 minutes until edges are lightly browned""",
    """Peanut Butter Cookies
1 3/4 cups all-purpose flour
1 cup peanut butter
1/2 cup butter, softened
1/2 cup granulated sugar
1/2 cup packed brown sugar
1 egg
1 teaspoon vanilla extract
1 teaspoon baking soda
1/4 teaspoon salt

Preheat oven to 350°F
Cream peanut butter, butter, and sugars
Beat in egg and vanilla
Mix in flour, baking soda, and salt
Shape into 1-inch balls
Press with fork to make crisscross pattern
Bake 10-12 minutes until edges are lightly browned""",
]
