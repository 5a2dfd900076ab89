"""English translations for the radial menu mod."""

TRANSLATIONS_EN = {
    # Settings screen
    "Settings_Title": "Radial Menu Settings",
    # Config option descriptions
    "Config_FoodBindSectors": "Auto-bind food sector number",
    "Config_ignoreDurabilityValue": "Skip using medkits below this durability value",
    "Config_showLowValueFood": "Include food when checking low-value items",
    "Config_quickUseLastItemQ": "Enable quick-use last item with short Q press",
    "Config_iconSize": "Icon size",
    "Config_iconDistanceFactor": "Icon distance factor from center",
    "Config_uiScalePercent": "Background UI scale percent",
    "Config_innerDeadZoneCoefficient": "Inner dead zone coefficient",
    "Config_outerDeadZoneCoefficient": "Outer dead zone coefficient",
    "Config_longPressQWaitDuration": "Long-press Q duration to open radial menu",
    "Config_UI8style": "8-sector UI style",
    "Config_UI6style": "6-sector UI style",
    "Config_sectorCount": "Number of sectors",
    "Config_isBulletTimeEnabled": "Enable bullet time",
    "Config_bulletTimeMultiplier": "Bullet time speed multiplier",
    "Config_radialMenuActivationKey": "Key to open radial menu",
    "Config_enableFirstPersonAdaptation": "Enable first-person adaptation",
    "Config_firstPersonSensitivity": "First-person radial sensitivity",
    "Config_enableThirdPersonAdaptation": "Enable third-person adaptation",
    "Config_thirdPersonSensitivityMultiplier": "Third-person sensitivity multiplier",
    "Config_lockRadialMenuToCenter": "Lock radial menu to screen center",
    "Config_hintOptionsOnly": "The following options are hints only and have no effect",
    "Config_radialMenuStuckHint": "Radial menu stuck on screen? Try pressing the 'Win' key",
    "Config_haveFunHint": "Have fun",
    "Config_rightClickCloseRadialMenuHint": "Right-click to quickly close the radial menu after opening",
    "Config_disableSpeechBubbles": "Disable ducks' speech bubbles",
    "Config_playerHatedTypeIDs": "Blacklisted foods ID(will be placed at the end of the recommendation list)",
    # UI hints
    "UI_ItemCount": "Count: {0}",
    "UI_BindingNotAllowed": "This item cannot be bound",
    "UI_InstallModConfig": "Check the Workshop page and install required dependency mods",
    "UI_DefaultStyle": "Default",
    "UI_StyleOption": "{0} style",
    "UI_NoStyleDetected": "No background set detected for {0} sectors; using default",
    # Log messages
    "Log_RadialMenuInit": "Initializing radial menu...",
    "Log_RadialMenuComplete": "Radial menu initialization complete",
    "Log_BindingComplete": "Persisted binding: Sector={0}, TypeID={1}, DisplayName={2}, autoBound={3}",
    "Log_IconDistanceUpdated": "Icon distance factor updated to {0}; recalculated icon positions",
    "Log_StyleUnavailable": "Style {0} is unavailable for sector {1}; using default {2}",
    "Log_LoadingStyle": "Loading background for sector {0}, using style: {1}",
    "Log_SectorAngle": "Calculated icon positions for {0} sectors; sector angle: {1}°",
    # Item use feedback
    "Use_ExplosionArt": "Explosion is art!",
    "Use_EatItem": "Eat {0}!",
    "Use_EquipItem": "Equip {0}!",
    "Use_UseItem": "Use {0}!",
    "Use_HealthRecovered": "Health restored!",
    "Use_Ouch": "Ouch! Need to heal",
    "Use_ReplaceAfterUse": "Replace after use",
    "Use_HealthRemaining": "Will recover {0} HP",
    "Use_DrinkItem": "Drink {0}",
    "Use_ColaOverflow": "Fizz! The cola overflowed!",
    "Use_ColaDrinking": "Glug glug glug...",
    "Use_TasteItem": "Take a sneaky taste of {0}~",
    "Use_ColaByeBye": "Pop the cola — worries be gone.",
    "Use_Cheers": "Cheers!",
    "Use_DrinkFirst": "Drink first!",
    "Use_DrinkForgetWorries": "Drink this and forget your worries~",
    "Use_FoodTasty": "{0} is delicious!",
    "Use_SoFragrant": "Smells amazing!",
    "Use_HealthFull": "Health is full",
    "Use_StrongDrink": "That's a strong one!",
    "Use_DrinkTasty": "Tastes great!",
    "Use_DrinkSecretly": "Sneak a sip of {0}~",
    "Use_FoodCannotUse": "Food {0} cannot be used",
    "Log_FoodEaten": "Ate food: {0}",
    "Use_DuckRefusesPoop": "The duck refuses to eat that — it's not food!",
    "Use_DontEatDuckPoop": "Don't let the duck eat poop!",
    "Use_PoopDetected": "Suspicious item detected: high-risk biological waste!",
    "Use_PoopGourmet": "The duck is not a gourmet — put away your weird tastes!",
    "Use_DuckCry": "The duck shed a sad tear: 'What did I do wrong?'",
    "Use_DuckQuestionLife": "The duck ponders the meaning of life... and your choices.",
    "Use_DuckReputation": "The duck's reputation fell by 99 points!",
    "Use_DuckGag": "Ugh — the duck is about to gag!",
    "Use_DuckCivilRights": "The duck demands respect for its basic dietary rights!",
    "Use_SurvivalMode": "Survival mode activated... at the cost of the soul.",
    "Use_PoopCuisine": "New cuisine unlocked: French Poop à la Duck.",
    "Use_DuckBetrayed": "The duck feels deeply betrayed...",
    # Food binding
    "FoodBind_AutoBindBurger": "Auto-bound Lao Ba's secret burger!",
    "FoodBind_FoundPoop": "Found a pile of {0} in inventory! Ew.",
    "FoodBind_PoopDetected": "High-risk biological waste detected!",
    # Binding
    "Binding_Success": "Bound: {0}",
    "Binding_Success_Short": "Bound {0}",
    "Binding_Failed": "Binding failed: {0}",
    # Item counts
    "Item_RemainingCount": "Remaining in inventory {0}",
    "Item_NoMoreItems_1": "You don't have this item in your inventory!",
    "Item_NoMoreItems_2": "This item is all used up!",
    "Item_NoMoreItems_3": "You no longer have this item!",
    "Item_NoMoreItems_4": "All gone!",
    "Item_NoMoreItems_5": "None left!",
    "Item_NoMoreItems_6": "Spent it all!",
    # Input handling
    "Input_SelectItemFirst": "Please select an item before binding",
    "Input_NoRadialHere": "You can't open the radial menu here!",
    "Input_NoLowValueItem": "No low-value item found",
    "Input_LowestValueItem": "Lowest value-to-weight ratio is {0}!",
    "Input_SuggestDrop": "Suggest dropping {0}!",
    "Input_CannotCarry": "Can't carry more — drop {0} first~",
    "Input_NotWorthMoney": "{0}? This doesn't seem worth much.",
    "Input_HeavyDrop": "Too heavy! Drop {0}!",
    "Input_CannotCarryAlt": "Can't carry more — drop {0} first~",
    "Input_LeastWorth": "{0} is the least valuable~",
    "Input_AuthorRequest": "Please give the radial menu a like — thanks!",
    # Menu
    "Menu_FocusLostClosed": "Focus lost, radial menu automatically closed",
    "Menu_PressToReopen": "Hold {0} to reopen the radial menu",
    # Food auto-binding
    "Food_AutoBindSector": "Auto-bound food {1} to sector {0}",
    "Food_PreviousFoodEaten": "Previous food was eaten, now eating {0}!",
    "Food_TiredOfOld": "Tired of the old one — finally switched to {0}!",
    "Food_FoundBetter": "Found a better {0}, replaced it!",
    "Food_CheapDelicious": "{0} is cheap and tasty!",
}
