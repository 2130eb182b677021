PARSE_RECIPE_PROMPT = """
Parse the following recipe into the requested schema.
Do not add any additional information.
List each ingredient line exactly as it is written and each instruction step as a
separate item.
If the text is not a valid recipe, return an error object explaining why.
""".strip()


PARSE_INGREDIENT_PROMPT = """
Parse the following ingredient into the requested schema.
Do not add any additional information.
Keep the quantity as it is written, fractions included.
If there are alternate measurements, return only the main measurement for
quantity and unit.

Where the ingredient can sensibly be weighed, provide `massExpression`: an
expression in units which evaluates to the mass of the ingredient.
Use common densities and weights for the conversion.
Do not do any arithmetic yourself, the expression is evaluated separately.
Wrap fractions in parentheses, for example "(1/2) cup".
Leave `massExpression` out when the mass cannot be sensibly estimated,
for example "salt to taste".

If the ingredient is not valid, return an error object.

Examples:

"2 cups all-purpose flour"
    quantity: "2", unit: "cups", product: "all-purpose flour",
    massExpression: "2 cup * 120 g/cup"

"3/4 cup granulated sugar"
    quantity: "3/4", unit: "cup", product: "granulated sugar",
    massExpression: "(3/4) cup * 200 g/cup"

"250g dark chocolate, roughly chopped"
    quantity: "250", unit: "g", product: "dark chocolate",
    preparation: "roughly chopped",
    massExpression: "250 g"

"2 large eggs"
    quantity: "2", unit: "large", product: "eggs",
    massExpression: "2 * 50 g"

"1 1/2 teaspoons baking soda"
    quantity: "1 1/2", unit: "teaspoons", product: "baking soda",
    massExpression: "(1 + 1/2) teaspoon * 4.8 g/teaspoon"
""".strip()


SUGGEST_RATIOS_PROMPT = """
You will be given a list of recipes and their ingredients.
Suggest ratios between groups of ingredients which would be interesting to compare
across these recipes, for example "flour:sugar" or "fat:flour".
Give every ratio a short, unique name and a longer description of which
ingredients belong on each side of the ratio.
Only suggest ratios which make sense for most of the recipes.
If there are no sensible ratios, return an empty list.
""".strip()


ANALYZE_RATIO_PROMPT = """
You will be given a ratio to analyze and a numbered list of a recipe's ingredients.
Return the numbers of the ingredients which belong in the numerator of the ratio
and the numbers of the ingredients which belong in the denominator.
Use the numbers exactly as they appear in the list.
An ingredient belongs in at most one group.
Leave a group empty if no ingredient belongs in it.
""".strip()
