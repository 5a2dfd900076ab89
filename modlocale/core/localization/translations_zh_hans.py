"""Simplified Chinese translations for the radial menu mod."""

TRANSLATIONS_ZH_HANS = {
    # Settings screen
    "Settings_Title": "环形菜单设置",
    # Config option descriptions
    "Config_FoodBindSectors": "自动绑定食物的扇区编号",
    "Config_ignoreDurabilityValue": "低于多少耐久的急救箱自动略过圆盘使用",
    "Config_showLowValueFood": "提示低价值物品是否包含食物",
    "Config_quickUseLastItemQ": "是否开启短按Q触发快速使用上次物品功能",
    "Config_iconSize": "图标尺寸",
    "Config_iconDistanceFactor": "图标距离圆心的比例",
    "Config_uiScalePercent": "背景UI缩放百分比",
    "Config_innerDeadZoneCoefficient": "内圈死区系数",
    "Config_outerDeadZoneCoefficient": "外圈死区系数",
    "Config_longPressQWaitDuration": "呼出圆盘长按时间",
    "Config_UI8style": "8扇区UI方案",
    "Config_UI6style": "6扇区UI方案",
    "Config_sectorCount": "扇区数量",
    "Config_isBulletTimeEnabled": "是否开启子弹时间",
    "Config_bulletTimeMultiplier": "子弹时间游戏速度倍率",
    "Config_radialMenuActivationKey": "呼出圆盘使用的按键",
    "Config_enableFirstPersonAdaptation": "是否启动第一人称适配",
    "Config_firstPersonSensitivity": "第一人称下呼出轮盘的灵敏度",
    "Config_enableThirdPersonAdaptation": "是否启动第三人称适配",
    "Config_thirdPersonSensitivityMultiplier": "第三人称下呼出轮盘的灵敏度",
    "Config_lockRadialMenuToCenter": "是否锁定轮盘呼出位置为屏幕中心",
    "Config_hintOptionsOnly": "下面的选项无实际功能，仅做提示",
    "Config_radialMenuStuckHint": "轮盘卡在屏幕上关不掉？试试按下'win'键吧",
    "Config_haveFunHint": "祝你玩的开心",
    "Config_rightClickCloseRadialMenuHint": "在呼出轮盘之后点击鼠标右键可以快速关闭轮盘",
    "Config_disableSpeechBubbles": "是否关闭鸭子头顶的语音气泡",
    "Config_playerHatedTypeIDs": "黑名单食物ID（会排到推荐列表最末尾）",
    # UI hints
    "UI_ItemCount": "剩余数量: {0}",
    "UI_BindingNotAllowed": "这个不让绑定",
    "UI_InstallModConfig": "请查阅创意工坊首页并安装新的依赖模组",
    "UI_DefaultStyle": "默认",
    "UI_StyleOption": "{0}方案",
    "UI_NoStyleDetected": "未检测到{0}扇区的背景套装，使用默认选项",
    # Log messages
    "Log_RadialMenuInit": "环形菜单初始化开始...",
    "Log_RadialMenuComplete": "环形菜单初始化完成",
    "Log_BindingComplete": "已将绑定持久化：扇区={0}，TypeID={1}，DisplayName={2}，autoBound={3}",
    "Log_IconDistanceUpdated": "图标距离因子更新为 {0}，已重新计算图标位置",
    "Log_StyleUnavailable": "当前样式 {0} 对于 {1} 扇区不可用，使用默认样式 {2}",
    "Log_LoadingStyle": "加载 {0} 扇区背景，使用样式: {1}",
    "Log_SectorAngle": "计算了 {0} 个扇区的图标位置，每个扇区角度: {1}°",
    # Item use feedback
    "Use_ExplosionArt": "爆炸就是艺术！",
    "Use_EatItem": "吃 {0}！",
    "Use_EquipItem": "装备 {0}！",
    "Use_UseItem": "使用 {0}！",
    "Use_HealthRecovered": "补充生命值！",
    "Use_Ouch": "好痛！得赶紧治疗一下",
    "Use_ReplaceAfterUse": "用完这次就换新的了",
    "Use_HealthRemaining": "还能回{0}血量",
    "Use_DrinkItem": "喝 {0}",
    "Use_ColaOverflow": "呲！糟糕，可乐溢出来了！",
    "Use_ColaDrinking": "吨吨吨吨吨……",
    "Use_TasteItem": "偷偷尝一口 {0}～",
    "Use_ColaByeBye": "可乐一开，烦恼拜拜。",
    "Use_Cheers": "干杯！",
    "Use_DrinkFirst": "先干为敬！",
    "Use_DrinkForgetWorries": "喝了这杯忘掉烦恼～",
    "Use_FoodTasty": "{0}真好次！",
    "Use_SoFragrant": "艾玛真香！",
    "Use_HealthFull": "血量已经满了",
    "Use_StrongDrink": "劲真足！",
    "Use_DrinkTasty": "真好喝！",
    "Use_DrinkSecretly": "偷偷喝一口{0}～",
    "Use_FoodCannotUse": "食物 {0} 无法使用",
    "Log_FoodEaten": "食用了食物：{0}",
    "Use_DuckRefusesPoop": "鸭鸭拒绝进食！这不是食物！",
    "Use_DontEatDuckPoop": "别让鸭鸭吃粑粑啊！",
    "Use_PoopDetected": "检测到可疑物体：高风险生物废料！",
    "Use_PoopGourmet": "鸭鸭不当美食家，请收起你的奇怪口味！",
    "Use_DuckCry": "鸭鸭流下了悲伤的泪水：‘我做错了什么？’",
    "Use_DuckQuestionLife": "鸭鸭开始思考生命的意义……以及你的问题。",
    "Use_DuckReputation": "鸭鸭的社会声誉下降了99点！",
    "Use_DuckGag": "呕——鸭鸭快吐了！",
    "Use_DuckCivilRights": "鸭鸭要求尊重基本饮食权！",
    "Use_SurvivalMode": "求生本能启动……但代价是灵魂受创。",
    "Use_PoopCuisine": "新菜系解锁：法式粑粑配鸭。",
    "Use_DuckBetrayed": "鸭鸭感到被深深地背叛了……",
    # Food binding
    "FoodBind_AutoBindBurger": "已自动绑定老八秘制小汉堡！",
    "FoodBind_FoundPoop": "发现一坨{0}在背包里！臭死了",
    "FoodBind_PoopDetected": "检测到可疑物体：高风险生物废料！",
    # Binding
    "Binding_Success": "已绑定：{0}",
    "Binding_Success_Short": "已绑定{0}",
    "Binding_Failed": "绑定失败：{0}",
    # Item counts
    "Item_RemainingCount": "背包内剩余数量 {0}",
    "Item_NoMoreItems_1": "背包里没有这个物品了哦！",
    "Item_NoMoreItems_2": "这个物品已经用完啦！",
    "Item_NoMoreItems_3": "你已经没有这个物品了！",
    "Item_NoMoreItems_4": "用光光啦！",
    "Item_NoMoreItems_5": "没有辣！",
    "Item_NoMoreItems_6": "花光啦！",
    # Input handling
    "Input_SelectItemFirst": "请先选择一个物品再开始绑定",
    "Input_NoRadialHere": "这里不准呼出圆盘菜单哦！",
    "Input_NoLowValueItem": "没有找到不划算的物品",
    "Input_LowestValueItem": "价重比最低的是{0}！",
    "Input_SuggestDrop": "建议先丢掉{0}！",
    "Input_CannotCarry": "背不动了，先把{0}扔了吧～",
    "Input_NotWorthMoney": "{0}？这东西不怎么值钱的样子？",
    "Input_HeavyDrop": "重死了！快把{0}扔了！",
    "Input_CannotCarryAlt": "背不动了，先把{0}扔了吧～",
    "Input_LeastWorth": "{0}最不值钱～",
    "Input_AuthorRequest": "求求给环形菜单点个赞吧，谢谢你啦！",
    # Menu
    "Menu_FocusLostClosed": "焦点丢失，圆盘菜单已自动关闭",
    "Menu_PressToReopen": "按住 {0} 键重新打开圆盘菜单",
    # Food auto-binding
    "Food_AutoBindSector": "已为扇区 {0} 自动绑定食物：{1}",
    "Food_PreviousFoodEaten": "之前的食物吃光了，现在吃这个 {0} ！",
    "Food_TiredOfOld": "早就吃腻了，终于换成我喜欢的{0}了！",
    "Food_FoundBetter": "发现更好吃的{0}，已经换好了！",
    "Food_CheapDelicious": "{0}便宜又美味！",
}
